# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from mama import configuration
from mama.configuration import Configuration
from mama.repository.configuration import CONFIGURATION_REPO
from mama.terminal.custom_typer import AliasedTyperGroup
from mama.terminal.validate import validate_log_level

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("use_color", _enabled(config["use_color"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (platform data directory)",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Journal file: {configuration.DATA_ENTRIES_PATH}")
    console.print(f"Log file: {configuration.LOG_FILE_PATH}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the journal file (None = platform data directory)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use the platform data directory)",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the banner when the journal opens",
        ),
    ] = None,
    use_color: Annotated[
        Optional[bool],
        typer.Option(
            "--use-color/--no-use-color",
            help="Enable/disable coloured output",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Level of the file log: DEBUG, INFO, WARNING, ERROR, CRITICAL",
            callback=validate_log_level,
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if data_path is not None and remove_data_path:
        raise typer.BadParameter("Use either --data-path or --remove-data-path, not both")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        use_color=use_color,
        log_level=log_level,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
