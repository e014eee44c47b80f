"""Geocoding adapters - Implementations of GeocoderPort."""

from .nominatim_adapter import NominatimGeocoderAdapter

__all__ = ["NominatimGeocoderAdapter"]
