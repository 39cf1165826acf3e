# SPDX-License-Identifier: MIT

import atexit

from mama.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    # Journal entries are saved by each command as it runs; only the
    # configuration is written lazily
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
