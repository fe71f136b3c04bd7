"""Airport ports - Abstraction for loading the airport directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import AirportDirectory


class AirportRepositoryPort(Protocol):
    """Port for loading airport reference data.

    Implementation: adapters/airports/csv_repository.py

    The repository is responsible for reading the reference table from
    persistent storage and building the directory once.
    """

    def load(self) -> AirportDirectory:
        """Load the airport directory.

        Raises:
            ReferenceOrInputNotFoundError: If the source does not exist.
            MalformedReferenceDataError: If the source cannot be parsed.
        """
        ...
