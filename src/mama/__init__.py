# SPDX-License-Identifier: MIT

from mama.cleanup import register_cleanup
from mama.initialize import initialize
from mama.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
