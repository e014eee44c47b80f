"""Day-based queries over an ItinerarySet."""

from __future__ import annotations

from typing import Tuple

from ..domain.models import ItineraryRecord, ItinerarySet


def day_labels(itinerary: ItinerarySet) -> Tuple[str, ...]:
    """Distinct day labels in order of first appearance (never sorted)."""
    return itinerary.day_labels


def filter_by_day(itinerary: ItinerarySet, day: str) -> Tuple[ItineraryRecord, ...]:
    """Records whose day equals ``day`` exactly, in their original order.

    An unknown day yields an empty tuple.
    """
    return tuple(record for record in itinerary if record.day == day)


def default_day(itinerary: ItinerarySet, fallback: str) -> str:
    """First day of the itinerary, or ``fallback`` when it has none."""
    labels = itinerary.day_labels
    return labels[0] if labels else fallback
