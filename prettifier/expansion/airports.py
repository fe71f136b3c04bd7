"""Airport code expansion.

Two ordered passes over a line:

1. ICAO tokens ``##XXXX`` / ``*##XXXX``.
2. IATA tokens ``#XXX`` / ``*#XXX``, scanned over the output of pass 1.

Because the IATA pass sees the ICAO pass output, an unknown ICAO token
such as ``##JFKX`` still exposes ``#JFK`` to the IATA pass. This ordering
is part of the markup semantics and must not become a fixed-point loop.
"""

from __future__ import annotations

import logging
import re
from re import Match, Pattern
from typing import Callable

from ..domain.models import AirportDirectory, AirportLabel, CodeKind

logger = logging.getLogger(__name__)

ICAO_PATTERN = re.compile(r"(?P<city>\*)?##(?P<code>[A-Z]{4})")
IATA_PATTERN = re.compile(r"(?P<city>\*)?#(?P<code>[A-Z]{3})")


def resolve_label(
    directory: AirportDirectory, code: str, kind: CodeKind
) -> AirportLabel:
    """Look ``code`` up and split its description into substitutable parts."""
    label = AirportLabel.from_description(directory.resolve(code, kind), code, kind)
    if not label.resolved:
        logger.debug("Unknown airport code", extra={"code": code, "kind": kind.name})
    return label


def _replacer(
    directory: AirportDirectory, kind: CodeKind
) -> Callable[[Match[str]], str]:
    def replace(match: Match[str]) -> str:
        label = resolve_label(directory, match.group("code"), kind)
        return label.pick(city_only=match.group("city") is not None)

    return replace


def _expand(
    line: str, pattern: Pattern[str], directory: AirportDirectory, kind: CodeKind
) -> str:
    # A callable replacement is inserted literally (no backreference parsing).
    return pattern.sub(_replacer(directory, kind), line)


def expand_icao_codes(line: str, directory: AirportDirectory) -> str:
    return _expand(line, ICAO_PATTERN, directory, CodeKind.ICAO)


def expand_iata_codes(line: str, directory: AirportDirectory) -> str:
    return _expand(line, IATA_PATTERN, directory, CodeKind.IATA)


def expand_airport_codes(line: str, directory: AirportDirectory) -> str:
    """Replace airport tokens in ``line`` (ICAO first, then IATA)."""
    return expand_iata_codes(expand_icao_codes(line, directory), directory)
