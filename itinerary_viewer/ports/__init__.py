"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .geocoding import GeocoderPort
from .loader import ItineraryLoaderPort
from .rendering import DayMapRendererPort, ItineraryRendererPort

__all__ = [
    "ItineraryLoaderPort",
    "GeocoderPort",
    "ItineraryRendererPort",
    "DayMapRendererPort",
    "CachePort",
]
