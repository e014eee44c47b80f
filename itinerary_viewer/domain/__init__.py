"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DataUnavailableError,
    GeocodingError,
    ItineraryError,
    RenderingError,
)
from .models import (
    ColumnNames,
    GeoLocation,
    ItineraryRecord,
    ItinerarySet,
    ItineraryViewState,
    Place,
    ViewStatus,
)

__all__ = [
    # Models
    "ColumnNames",
    "ItineraryRecord",
    "ItinerarySet",
    "ItineraryViewState",
    "ViewStatus",
    "GeoLocation",
    "Place",
    # Errors
    "ItineraryError",
    "DataUnavailableError",
    "GeocodingError",
    "RenderingError",
    "ConfigurationError",
]
