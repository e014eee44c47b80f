"""Rendering adapters.

Available implementations:
- HtmlItineraryRenderer: HTML cards for a view state (ItineraryRendererPort)
- FoliumDayMapRenderer: Folium map of a day's places (DayMapRendererPort)
"""

from .folium_adapter import FoliumDayMapRenderer
from .html_adapter import HtmlItineraryRenderer

__all__ = ["HtmlItineraryRenderer", "FoliumDayMapRenderer"]
