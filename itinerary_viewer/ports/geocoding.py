"""Geocoding port - Abstraction for locating itinerary places."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Place


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def geocode(self, query: str) -> Optional[Place]:
        """Geocode a place description.

        Args:
            query: Free-text place (e.g., "Bastión de los Pescadores Budapest").

        Returns:
            Place with coordinates, or None if not found.
        """
        ...
