"""Domain layer - Core models and errors.

This module contains the immutable airport directory, the label type
produced by airport lookups and the typed errors used across the
application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    MalformedReferenceDataError,
    OutputWriteError,
    PrettifierError,
    ReferenceOrInputNotFoundError,
)
from .models import AirportDirectory, AirportLabel, CodeKind, describe_airport

__all__ = [
    # Models
    "AirportDirectory",
    "AirportLabel",
    "CodeKind",
    "describe_airport",
    # Errors
    "PrettifierError",
    "MalformedReferenceDataError",
    "ReferenceOrInputNotFoundError",
    "ConfigurationError",
    "OutputWriteError",
]
