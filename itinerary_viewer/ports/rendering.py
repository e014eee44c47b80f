"""Rendering ports - Abstractions for itinerary and map output.

These protocols let the view service stay independent of the
presentation technology (HTML cards, Folium maps, ...).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import ItineraryRecord, ItineraryViewState


class ItineraryRendererPort(Protocol):
    """Port for rendering a view state.

    Implementation: adapters/rendering/html_adapter.py
    """

    def render(self, state: ItineraryViewState) -> str:
        """Render the state (loading, error or the selected day).

        Args:
            state: The view state to render.

        Returns:
            The rendered document fragment.
        """
        ...


class DayMapRendererPort(Protocol):
    """Port for rendering one day's places on a map.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        records: Sequence[ItineraryRecord],
        output_path: Path,
    ) -> Path:
        """Render the records' places on a map and save to file.

        Args:
            records: The day's records, in visiting order.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
