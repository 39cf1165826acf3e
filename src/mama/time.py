# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

# Fixed day/month/year + 24-hour pattern used in the journal file, e.g. 28/10/25 01:14
STORAGE_DATETIME_FORMAT = "DD/MM/YY HH:mm"


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def now_local_minute() -> pendulum.DateTime:
    """Current local time truncated to the precision kept in the journal file."""
    return now_local().set(second=0, microsecond=0)


def datetime_to_storage_str(datetime: pendulum.DateTime) -> str:
    return datetime.format(STORAGE_DATETIME_FORMAT)


def datetime_to_storage_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_storage_str(datetime)


def datetime_from_storage_str(datetime: str) -> pendulum.DateTime:
    return cast(
        pendulum.DateTime,
        pendulum.from_format(datetime.strip(), STORAGE_DATETIME_FORMAT, tz="local"),
    )


def datetime_from_storage_str_optional(
    datetime: Optional[str],
) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_storage_str(datetime)
