"""CSV airport repository adapter.

Reads the airport lookup table and builds the directory once, adding:
- Existence check with a typed error
- Caching of the built directory
- Logging of the table size
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import IOConfig, get_config
from ...domain.errors import (
    MalformedReferenceDataError,
    ReferenceOrInputNotFoundError,
)
from ...domain.models import AirportDirectory
from ...expansion.directory import build_directory


@dataclass
class CSVAirportRepository:
    """Airport repository that loads from a CSV file.

    This adapter implements AirportRepositoryPort.

    Attributes:
        path: Path to the airport lookup CSV
        config: I/O configuration (encoding)
    """

    path: Path
    config: IOConfig = field(default_factory=lambda: get_config().io)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _directory: Optional[AirportDirectory] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def load(self) -> AirportDirectory:
        """Load the airport directory from the CSV file.

        Returns:
            The IATA and ICAO lookup tables.

        Raises:
            ReferenceOrInputNotFoundError: If the file does not exist.
            MalformedReferenceDataError: If the table is malformed or cannot
                be decoded.
        """
        if self._directory is not None:
            return self._directory

        if not self.path.is_file():
            raise ReferenceOrInputNotFoundError(
                "Airport lookup file not found",
                path=str(self.path),
                role="airport lookup",
            )

        self._logger.debug("Loading airport lookup", extra={"path": str(self.path)})

        try:
            with self.path.open(encoding=self.config.encoding, newline="") as f:
                directory = build_directory(csv.reader(f))
        except OSError as e:
            raise ReferenceOrInputNotFoundError(
                "Airport lookup file could not be read",
                path=str(self.path),
                role="airport lookup",
                cause=e,
            )
        except (UnicodeDecodeError, csv.Error) as e:
            raise MalformedReferenceDataError("Unreadable data", cause=e)

        self._directory = directory
        self._logger.info(
            "Airport directory loaded",
            extra={
                "iata_codes": len(directory.by_iata),
                "icao_codes": len(directory.by_icao),
            },
        )
        return directory

    def clear_cache(self) -> None:
        """Forget the loaded directory so the next load re-reads the file."""
        self._directory = None
        self._logger.debug("Airport directory cache cleared")
