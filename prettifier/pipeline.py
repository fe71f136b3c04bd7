"""Line-by-line orchestration of the expansion stages.

Each input line goes through:

1. Vertical whitespace normalization.
2. Airport code expansion (ICAO pass, then IATA pass).
3. Date and time expansion, followed by trimming.

The resulting lines are then filtered so that no two empty lines are
emitted back to back.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .domain.models import AirportDirectory
from .expansion.airports import expand_airport_codes
from .expansion.normalize import normalize_line, trim_line
from .expansion.temporal import expand_dates_and_times


def prettify_line(line: str, directory: AirportDirectory) -> str:
    """Run every expansion stage over a single line."""
    line = normalize_line(line)
    line = expand_airport_codes(line, directory)
    return expand_dates_and_times(line)


def collapse_blank_lines(lines: Iterable[str]) -> Iterator[str]:
    """Drop an empty line when the previously emitted line was empty too."""
    previous_blank = False
    for line in lines:
        blank = not trim_line(line)
        if blank and previous_blank:
            continue
        yield line
        previous_blank = blank


def expand(input_lines: Iterable[str], directory: AirportDirectory) -> List[str]:
    """Prettify a whole itinerary.

    Args:
        input_lines: Raw itinerary lines, without line terminators.
        directory: Airport lookup tables.

    Returns:
        The prettified lines, with runs of blank lines collapsed to one.
    """
    return list(
        collapse_blank_lines(prettify_line(line, directory) for line in input_lines)
    )
