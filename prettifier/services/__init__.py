"""Services layer - Application orchestration.

Available services:
- ItineraryPrettifierService: Prettifies an itinerary file end to end
"""

from .prettifier_service import ItineraryPrettifierService, PrettifyReport

__all__ = ["ItineraryPrettifierService", "PrettifyReport"]
