"""Build the airport directory from reference table rows.

Rows are field sequences as produced by ``csv.reader``; the first row is
the header. Validation is deliberately literal: every field of every data
row must be non-empty, including columns the directory never reads.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Sequence

from ..domain.errors import MalformedReferenceDataError
from ..domain.models import AirportDirectory, describe_airport
from .normalize import trim_line

logger = logging.getLogger(__name__)

IATA_COLUMN = "iata_code"
ICAO_COLUMN = "icao_code"
NAME_COLUMN = "name"
CITY_COLUMN = "municipality"
COUNTRY_COLUMN = "iso_country"
COORDINATES_COLUMN = "coordinates"

REQUIRED_COLUMNS = (
    IATA_COLUMN,
    ICAO_COLUMN,
    NAME_COLUMN,
    CITY_COLUMN,
    COUNTRY_COLUMN,
    COORDINATES_COLUMN,
)


def _column_indexes(header: Sequence[str]) -> Dict[str, int]:
    """Map each required column to its position in the header.

    Names are compared trimmed and case-folded. If a name repeats, the
    last occurrence wins.
    """
    positions = {trim_line(name).casefold(): i for i, name in enumerate(header)}
    missing = tuple(c for c in REQUIRED_COLUMNS if c not in positions)
    if missing:
        raise MalformedReferenceDataError(
            "Missing required columns: " + ", ".join(missing),
            line_number=1,
            missing_columns=missing,
        )
    return {c: positions[c] for c in REQUIRED_COLUMNS}


def build_directory(rows: Iterable[Sequence[str]]) -> AirportDirectory:
    """Parse the reference table into an AirportDirectory.

    Args:
        rows: Header row followed by data rows.

    Returns:
        The IATA and ICAO lookup tables.

    Raises:
        MalformedReferenceDataError: If the header is absent, a required
            column is missing, or a data row is short or has an empty field.
    """
    iterator = iter(rows)
    header = next(iterator, None)
    if header is None:
        raise MalformedReferenceDataError("Missing header row", line_number=1)

    columns = _column_indexes(header)
    by_iata: Dict[str, str] = {}
    by_icao: Dict[str, str] = {}

    for line_number, row in enumerate(iterator, start=2):
        fields = [trim_line(value) for value in row]
        if len(fields) < len(header) or any(not value for value in fields):
            raise MalformedReferenceDataError(
                "Empty columns in data", line_number=line_number
            )

        description = describe_airport(
            fields[columns[NAME_COLUMN]],
            fields[columns[CITY_COLUMN]],
            fields[columns[COUNTRY_COLUMN]],
        )
        iata_code = fields[columns[IATA_COLUMN]]
        icao_code = fields[columns[ICAO_COLUMN]]
        if iata_code:
            by_iata[iata_code] = description
        if icao_code:
            by_icao[icao_code] = description

    logger.debug(
        "Airport directory built",
        extra={"iata_codes": len(by_iata), "icao_codes": len(by_icao)},
    )
    return AirportDirectory(by_iata=by_iata, by_icao=by_icao)
