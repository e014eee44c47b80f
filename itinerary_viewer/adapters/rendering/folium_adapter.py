"""Folium day-map renderer adapter.

Places one numbered marker per located activity of a day and joins
them in visiting order. Places come from free text, so they are
geocoded first; records without a mappable place are left out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

import folium

from ...config import MapsConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import ItineraryRecord, Place
from ...ports.geocoding import GeocoderPort
from ...presentation import map_search_url


@dataclass
class FoliumDayMapRenderer:
    """Folium-based interactive map of one day.

    Attributes:
        geocoder: Locates the records' places
        maps: Map configuration (city suffix, excluded places)
    """

    geocoder: GeocoderPort
    maps: MapsConfig = field(default_factory=lambda: get_config().maps)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def locate(
        self, records: Sequence[ItineraryRecord]
    ) -> List[Tuple[ItineraryRecord, Place]]:
        """Geocode the records that have a mappable place."""
        located: List[Tuple[ItineraryRecord, Place]] = []
        for record in records:
            if map_search_url(record.place, self.maps) is None:
                continue
            query = f"{record.place} {self.maps.city_suffix}".strip()
            place = self.geocoder.geocode(query)
            if place is None:
                self._logger.debug("Place not located", extra={"query": query})
                continue
            located.append((record, place))
        return located

    def render(
        self,
        records: Sequence[ItineraryRecord],
        output_path: Path,
    ) -> Path:
        """Render the day's places and save the map as HTML.

        Raises:
            RenderingError: If no place could be located or saving fails.
        """
        located = self.locate(records)
        if not located:
            raise RenderingError(
                "No place of this day could be located",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering day map",
            extra={"places": len(located), "output_path": str(output_path)},
        )

        coordinates = [
            (place.location.latitude, place.location.longitude) for _, place in located
        ]
        m = folium.Map(location=coordinates[0], zoom_start=13, control_scale=True)

        for idx, (record, place) in enumerate(located, start=1):
            folium.Marker(
                location=(place.location.latitude, place.location.longitude),
                popup=f"{idx}. {record.time} {record.activity} ({record.place})",
                tooltip=record.activity,
                icon=folium.Icon(color="purple"),
            ).add_to(m)

        if len(coordinates) >= 2:
            folium.PolyLine(
                locations=coordinates, color="purple", weight=4, opacity=0.8
            ).add_to(m)
            m.fit_bounds(coordinates)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except OSError as e:
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path
