"""Storage ports - Reading itineraries and writing prettified output."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence


class ItineraryStorePort(Protocol):
    """Port for itinerary text input and output.

    Implementation: adapters/storage/text_file_store.py
    """

    def exists(self, path: Path) -> bool:
        """Check whether ``path`` resolves to a readable itinerary."""
        ...

    def read_lines(self, path: Path) -> List[str]:
        """Read the itinerary as lines without terminators.

        Raises:
            ReferenceOrInputNotFoundError: If the path does not exist.
        """
        ...

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        """Write ``lines``, each followed by a line terminator."""
        ...
