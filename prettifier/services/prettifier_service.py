"""Itinerary prettifier service - Main orchestrator.

Wires the airport repository, the itinerary store and the expansion
pipeline together. Output is written only once the whole itinerary has
been expanded, so a failing run leaves no partial file behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ..domain.errors import ReferenceOrInputNotFoundError
from ..pipeline import expand
from ..ports.airports import AirportRepositoryPort
from ..ports.storage import ItineraryStorePort


@dataclass(frozen=True, slots=True)
class PrettifyReport:
    """Summary of a completed run.

    Attributes:
        lines_read: Number of input lines
        lines_written: Number of output lines after blank-line collapsing
        airport_codes: Number of IATA and ICAO codes in the directory
    """

    lines_read: int
    lines_written: int
    airport_codes: int


@dataclass
class ItineraryPrettifierService:
    """Main service for prettifying itineraries.

    This service orchestrates the full run:
    1. Input existence check
    2. Airport directory loading
    3. Itinerary reading and expansion
    4. Output writing

    Attributes:
        airport_repository: Loads the airport directory
        store: Reads and writes itinerary text
    """

    airport_repository: AirportRepositoryPort
    store: ItineraryStorePort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def prettify_lines(self, lines: Sequence[str]) -> List[str]:
        """Expand already-read itinerary lines.

        Raises:
            ReferenceOrInputNotFoundError: If the airport lookup is missing.
            MalformedReferenceDataError: If the airport lookup is malformed.
        """
        directory = self.airport_repository.load()
        return expand(lines, directory)

    def prettify_file(self, input_path: Path, output_path: Path) -> PrettifyReport:
        """Prettify ``input_path`` into ``output_path``.

        Raises:
            ReferenceOrInputNotFoundError: If the input or lookup is missing.
            MalformedReferenceDataError: If the airport lookup is malformed.
        """
        self._logger.info(
            "Starting itinerary prettification",
            extra={"input": str(input_path), "output": str(output_path)},
        )

        if not self.store.exists(input_path):
            raise ReferenceOrInputNotFoundError(
                "Input file not found", path=str(input_path), role="input"
            )

        directory = self.airport_repository.load()
        lines = self.store.read_lines(input_path)
        output = expand(lines, directory)
        self.store.write_lines(output_path, output)

        report = PrettifyReport(
            lines_read=len(lines),
            lines_written=len(output),
            airport_codes=directory.size,
        )
        self._logger.info(
            "Itinerary prettified",
            extra={
                "lines_read": report.lines_read,
                "lines_written": report.lines_written,
            },
        )
        return report
