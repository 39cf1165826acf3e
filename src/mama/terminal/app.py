# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mama.terminal import configuration
from mama.terminal.custom_typer import AliasedTyperGroup
from mama.terminal.entries import list_entries
from mama.terminal.shell import shell
from mama.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Mama - your maternal health journal in the CLI",
)
app.add_typer(configuration.app, name="config, c")
app.command(name="shell, sh")(shell)
app.command(name="list, ls")(list_entries)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the banner",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Plain, uncoloured output",
        ),
    ] = False,
) -> None:
    """
    Mama - your maternal health journal in the CLI

    Run without a command to open the interactive journal.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_use_color(False)
    if ctx.invoked_subcommand is None:
        shell()


def run() -> None:
    app()
