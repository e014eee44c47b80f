"""Nominatim geocoder adapter.

Locates itinerary places with OpenStreetMap's Nominatim service:
- results (and misses) cached through CachePort
- requests rate limited with geopy's RateLimiter
- service errors logged and reported as "not found"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from geopy.exc import GeocoderServiceError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.errors import GeocodingError
from ...domain.models import GeoLocation, Place
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter with caching and rate limiting.

    Attributes:
        config: Geocoding configuration
        cache: Cache for geocoding results
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    cache: CachePort[Optional[Place]] = field(
        default_factory=lambda: InMemoryCache(name="geocode", max_size=512)
    )

    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_geocoder(self) -> Any:
        """Get or initialize the rate-limited geocode function."""
        if self._geocode_fn is not None:
            return self._geocode_fn

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self._geocode_fn = RateLimiter(
            geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,
        )
        return self._geocode_fn

    def _lookup(self, query: str) -> Optional[Place]:
        """Query Nominatim once.

        Raises:
            GeocodingError: If the service failed (timeout, unavailable, ...).
        """
        try:
            location = self._get_geocoder()(query, language=self.config.language)
        except GeocoderServiceError as e:
            raise GeocodingError(f"Geocoding failed for {query!r}", query=query, cause=e)

        if location is None:
            self._logger.debug("Geocode returned no result", extra={"query": query})
            return None

        place = Place(
            query=query,
            name=str(location.address),
            location=GeoLocation(
                latitude=float(location.latitude),
                longitude=float(location.longitude),
            ),
        )
        self._logger.debug(
            "Geocode success",
            extra={"query": query, "place": place.name},
        )
        return place

    def geocode(self, query: str) -> Optional[Place]:
        """Geocode a place description.

        Hits and misses are cached; service errors are not, so the next
        request for the same place tries again.

        Args:
            query: The place to locate.

        Returns:
            Place with coordinates, or None if not found or the service
            failed.
        """
        if not query or not query.strip():
            return None

        cache_key = f"{query.strip().lower()}:{self.config.language}"
        try:
            return self.cache.get_or_compute(cache_key, lambda: self._lookup(query))
        except GeocodingError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": e.query, "error": str(e)},
            )
            return None
