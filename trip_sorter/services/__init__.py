"""Services layer - Application orchestration.

Available services:
- ItinerarySortingService: Sorts raw cards and renders the itinerary
- open_session: Imports and indexes a set of cards
"""

from .itinerary_service import ItinerarySortingService, open_session

__all__ = ["ItinerarySortingService", "open_session"]
