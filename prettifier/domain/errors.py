"""Typed domain errors for the itinerary prettifier.

All errors inherit from PrettifierError and can optionally wrap a root
cause exception for debugging. Per-token failures (unknown airport codes,
unparseable dates) are never errors: they fall back to literal text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PrettifierError(Exception):
    """Base error for the prettifier domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class MalformedReferenceDataError(PrettifierError):
    """The airport lookup table cannot be turned into a directory.

    Raised for a missing header row, missing required columns, rows
    shorter than the header or rows containing an empty field.

    Attributes:
        line_number: 1-based line of the offending row, if any
        missing_columns: Required columns absent from the header
    """

    line_number: Optional[int] = None
    missing_columns: tuple[str, ...] = ()


@dataclass
class ReferenceOrInputNotFoundError(PrettifierError):
    """An input or airport lookup path does not resolve to a file.

    Attributes:
        path: The path that was looked up
        role: Which file was missing ("input" or "airport lookup")
    """

    path: Optional[str] = None
    role: str = ""


@dataclass
class ConfigurationError(PrettifierError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class OutputWriteError(PrettifierError):
    """The prettified itinerary could not be written.

    Attributes:
        path: The output path
    """

    path: Optional[str] = None
