"""Typed domain errors for the itinerary viewer.

All errors inherit from ItineraryError and can optionally wrap a root
cause exception for debugging. The parser never raises; these errors
come from the edges (loading, geocoding, rendering, configuration).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ItineraryError(Exception):
    """Base error for the itinerary viewer.

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
class DataUnavailableError(ItineraryError):
    """The raw itinerary text could not be obtained.

    Missing file, HTTP failure, decoding problem and permission errors
    all collapse into this one condition.

    Attributes:
        source: Description of the source that failed (path, URL, ...)
    """

    source: str = ""


@dataclass
class GeocodingError(ItineraryError):
    """Failed to geocode a place.

    Attributes:
        query: The place query that failed
    """

    query: str = ""


@dataclass
class RenderingError(ItineraryError):
    """Map or HTML rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(ItineraryError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
