"""Itinerary view service - Load, select and render.

The service holds no view state of its own. Each view owns an
ItineraryViewState and hands it back in; every operation that changes
something returns a new state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from ..config import AppConfig, get_config
from ..domain.errors import DataUnavailableError
from ..domain.models import (
    ColumnNames,
    ItineraryRecord,
    ItineraryViewState,
)
from ..itinerary.parser import parse_itinerary
from ..itinerary.query import filter_by_day
from ..ports.loader import ItineraryLoaderPort
from ..ports.rendering import DayMapRendererPort, ItineraryRendererPort


@dataclass
class ItineraryViewService:
    """Orchestrates load -> parse -> (repeatedly) filter and render.

    Attributes:
        loader: Provides the raw itinerary text
        renderer: Renders a view state
        map_renderer: Optional renderer for a day's map
        config: Application configuration
    """

    loader: ItineraryLoaderPort
    renderer: ItineraryRendererPort
    map_renderer: Optional[DayMapRendererPort] = None
    config: AppConfig = field(default_factory=get_config)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def columns(self) -> ColumnNames:
        c = self.config.columns
        return ColumnNames(
            day=c.day,
            time=c.time,
            activity=c.activity,
            place=c.place,
            transport=c.transport,
            alternative=c.alternative,
        )

    def initial_state(self) -> ItineraryViewState:
        return ItineraryViewState.loading(self.config.default_day)

    def load(self) -> ItineraryViewState:
        """Load and parse the itinerary, once.

        Calls the loader exactly once. Any loader failure becomes the
        ERROR state with the generic message; a successful load is READY
        even when it has no records.

        Returns:
            The READY or ERROR state.
        """
        try:
            text = self.loader.load_raw_text()
        except DataUnavailableError as e:
            self._logger.error(
                "Itinerary unavailable",
                extra={"source": e.source, "error": str(e)},
            )
            return ItineraryViewState.failed(
                self.config.error_message, self.config.default_day
            )

        itinerary = parse_itinerary(
            text,
            columns=self.columns,
            delimiter=self.config.loader.delimiter,
        )
        state = ItineraryViewState.ready(itinerary, self.config.default_day)
        self._logger.info(
            "Itinerary loaded",
            extra={
                "records": len(itinerary),
                "days": len(itinerary.day_labels),
                "selected_day": state.selected_day,
            },
        )
        return state

    def select_day(self, state: ItineraryViewState, day: str) -> ItineraryViewState:
        """Return ``state`` with ``day`` selected; only READY states change."""
        if not state.is_ready:
            return state
        self._logger.debug("Day selected", extra={"day": day})
        return state.with_selected_day(day)

    def visible_records(self, state: ItineraryViewState) -> Tuple[ItineraryRecord, ...]:
        if not state.is_ready:
            return ()
        return filter_by_day(state.itinerary, state.selected_day)

    def render(self, state: ItineraryViewState) -> str:
        return self.renderer.render(state)

    def render_day_map(
        self,
        state: ItineraryViewState,
        output_path: Optional[Path] = None,
    ) -> Optional[Path]:
        """Render the selected day's map.

        Returns:
            The map path, or None when there is no map renderer or the
            state has nothing to show.

        Raises:
            RenderingError: If the renderer fails.
        """
        records = self.visible_records(state)
        if self.map_renderer is None or not records:
            return None

        output_path = output_path or self.config.output_dir / f"mapa_{state.selected_day}.html"
        return self.map_renderer.render(records, output_path)
