"""Services layer - Application orchestration.

Available services:
- ItineraryViewService: load, day selection and rendering for a view
"""

from .itinerary_service import ItineraryViewService

__all__ = ["ItineraryViewService"]
