"""Itinerary parsing and querying.

This subpackage turns raw delimited text into an ItinerarySet and
answers the day-based questions the view asks of it.
"""

from .parser import parse_itinerary
from .query import day_labels, default_day, filter_by_day

__all__ = ["parse_itinerary", "day_labels", "default_day", "filter_by_day"]
