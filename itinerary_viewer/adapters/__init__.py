"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Itinerary sources (local file, HTTP, embedded text)
- Geocoding services (Nominatim)
- Rendering engines (HTML cards, Folium)
- Caching (in-memory)
"""
