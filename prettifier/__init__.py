"""Top-level package for the itinerary prettifier.

Turns itinerary text with inline markup (``#LAX``, ``##EGLL``,
``D(...)``, ``T12(...)``, ``T24(...)``) into human-readable text, using
an airport lookup CSV for code resolution.
"""

from .pipeline import expand, prettify_line

__all__ = ["expand", "prettify_line"]
