"""Token expansion stages.

Each stage is a pure ``str -> str`` rewrite of one itinerary line:

- normalize: vertical whitespace escapes -> newline
- airports: ``##ICAO`` / ``#IATA`` codes -> airport names or cities
- temporal: ``D()``, ``T12()``, ``T24()`` -> formatted dates and times

The directory module builds the lookup tables the airport stage reads.
"""

from .airports import expand_airport_codes
from .directory import REQUIRED_COLUMNS, build_directory
from .normalize import normalize_line, trim_line
from .temporal import expand_dates_and_times, parse_offset_datetime

__all__ = [
    "REQUIRED_COLUMNS",
    "build_directory",
    "expand_airport_codes",
    "expand_dates_and_times",
    "normalize_line",
    "parse_offset_datetime",
    "trim_line",
]
