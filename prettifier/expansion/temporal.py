"""Date and time token expansion.

Three sequential scans, each over the output of the previous one:

- ``D(...)``   -> ``15 Mar 2024``
- ``T12(...)`` -> ``10:00am (+02:00)``
- ``T24(...)`` -> ``10:00 (+02:00)``

The payload is an ISO-8601 extended date-time with a mandatory UTC offset
(``Z`` or ``+HH:MM``), optionally followed by a bracketed region zone such
as ``[Europe/Paris]``. Values are formatted in their own offset, never
converted to UTC. A payload that does not parse leaves the token as is.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, tzinfo
from re import Match, Pattern
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

from .normalize import trim_line

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"D\((?P<payload>[^)]+)\)")
TIME12_PATTERN = re.compile(r"T12\((?P<payload>[^)]+)\)")
TIME24_PATTERN = re.compile(r"T24\((?P<payload>[^)]+)\)")

# isoparse also accepts basic format, date-only values, 24:00 and offsetless
# times; only the extended date-time-with-offset shape reaches it.
_OFFSET_DATETIME_SHAPE = re.compile(
    r"(?P<value>\d{4}-\d{2}-\d{2}T(?:[01]\d|2[0-3]):\d{2}(?::\d{2}(?:\.\d+)?)?"
    r"(?:Z|[+-]\d{2}:\d{2}))"
    r"(?:\[(?P<zone>[^\]]+)\])?",
    re.ASCII,
)

MAX_OFFSET = timedelta(hours=18)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _region(name: str) -> Optional[tzinfo]:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def parse_offset_datetime(payload: str) -> Optional[datetime]:
    """Parse an ISO-8601 date-time that carries an explicit offset.

    Returns:
        An aware datetime in the payload's offset (or in its bracketed
        region zone), or None if the payload is not a valid value.
    """
    match = _OFFSET_DATETIME_SHAPE.fullmatch(payload)
    if match is None:
        return None

    try:
        value = isoparse(match.group("value"))
    except (ValueError, OverflowError):
        return None

    offset = value.utcoffset()
    if offset is None or abs(offset) > MAX_OFFSET:
        return None

    zone_name = match.group("zone")
    if zone_name is None:
        return value
    region = _region(zone_name)
    if region is None:
        return None
    return value.astimezone(region)


def format_offset(value: datetime) -> str:
    """Render the UTC offset suffix, ``(+02:00)`` or ``(00:00)`` for UTC."""
    delta = value.utcoffset() or timedelta(0)
    total = int(delta.total_seconds())
    if total == 0:
        return "(00:00)"
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return f"({text})"


def format_date(value: datetime) -> str:
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year:04d}"


def format_time12(value: datetime) -> str:
    hour = value.hour % 12 or 12
    marker = "am" if value.hour < 12 else "pm"
    return f"{hour:02d}:{value.minute:02d}{marker} {format_offset(value)}"


def format_time24(value: datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d} {format_offset(value)}"


def _expand(
    line: str, pattern: Pattern[str], formatter: Callable[[datetime], str]
) -> str:
    def replace(match: Match[str]) -> str:
        value = parse_offset_datetime(match.group("payload"))
        if value is None:
            logger.debug(
                "Unparseable date-time token",
                extra={"token": match.group(0)},
            )
            return match.group(0)
        return formatter(value)

    return pattern.sub(replace, line)


def expand_dates(line: str) -> str:
    return _expand(line, DATE_PATTERN, format_date)


def expand_times12(line: str) -> str:
    return _expand(line, TIME12_PATTERN, format_time12)


def expand_times24(line: str) -> str:
    return _expand(line, TIME24_PATTERN, format_time24)


def expand_dates_and_times(line: str) -> str:
    """Expand D(), T12() and T24() tokens in order, then trim the line."""
    line = expand_dates(line)
    line = expand_times12(line)
    line = expand_times24(line)
    return trim_line(line)
