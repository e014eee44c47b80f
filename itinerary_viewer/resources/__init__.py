"""Itinerary files bundled with the package."""
