"""Text file adapter for itinerary input and output."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ...config import IOConfig, get_config
from ...domain.errors import OutputWriteError, ReferenceOrInputNotFoundError


@dataclass
class TextFileStore:
    """Reads and writes itineraries as plain text files.

    Lines are split on ``\\n``, ``\\r\\n`` and ``\\r`` only, so vertical tab
    and form feed characters stay inside a line for the normalizer. Output
    goes to a temporary file that replaces the target only once fully
    written.

    Attributes:
        config: I/O configuration (encoding, output newline)
    """

    config: IOConfig = field(default_factory=lambda: get_config().io)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_lines(self, path: Path) -> List[str]:
        path = Path(path)
        if not self.exists(path):
            raise ReferenceOrInputNotFoundError(
                "Input file not found", path=str(path), role="input"
            )

        try:
            # Universal newlines: "\r\n" and "\r" arrive as "\n".
            with path.open(encoding=self.config.encoding, newline=None) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReferenceOrInputNotFoundError(
                "Input file could not be read", path=str(path), role="input", cause=e
            )

        if not text:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        self._logger.debug(
            "Itinerary read", extra={"path": str(path), "lines": len(lines)}
        )
        return lines

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        """Write ``lines`` atomically.

        Raises:
            OutputWriteError: If the text cannot be encoded or written. The
                target file is left untouched.
        """
        path = Path(path)
        newline = self.config.newline
        try:
            data = "".join(line + newline for line in lines).encode(
                self.config.encoding
            )
        except UnicodeEncodeError as e:
            raise OutputWriteError(
                "Output could not be encoded", path=str(path), cause=e
            )

        try:
            fd, temp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise OutputWriteError(
                "Output file could not be written", path=str(path), cause=e
            )

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(temp_name, path)
        except OSError as e:
            Path(temp_name).unlink(missing_ok=True)
            raise OutputWriteError(
                "Output file could not be written", path=str(path), cause=e
            )

        self._logger.debug(
            "Itinerary written", extra={"path": str(path), "lines": len(lines)}
        )
