"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the expansion core and the external
adapters that read reference data and itinerary files.
"""

from .airports import AirportRepositoryPort
from .storage import ItineraryStorePort

__all__ = [
    "AirportRepositoryPort",
    "ItineraryStorePort",
]
