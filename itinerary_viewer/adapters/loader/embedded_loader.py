"""Embedded itinerary loader adapter.

Serves text that ships with the program: an in-memory string (a fixture
in tests, an itinerary pasted in the UI) or a CSV bundled in
``itinerary_viewer/resources``.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from typing import Optional

from ...domain.errors import DataUnavailableError

RESOURCE_PACKAGE = "itinerary_viewer.resources"
SAMPLE_RESOURCE = "Budapest.csv"


@dataclass
class EmbeddedItineraryLoader:
    """Loader returning fixed text.

    Attributes:
        text: In-memory itinerary text; takes precedence over ``resource``
        resource: Name of a bundled CSV, read when ``text`` is None
    """

    text: Optional[str] = None
    resource: Optional[str] = SAMPLE_RESOURCE

    def load_raw_text(self) -> str:
        if self.text is not None:
            return self.text

        if not self.resource:
            raise DataUnavailableError(
                "No embedded itinerary text",
                source="embedded",
            )

        try:
            return (
                resources.files(RESOURCE_PACKAGE)
                .joinpath(self.resource)
                .read_text(encoding="utf-8")
            )
        except (OSError, UnicodeDecodeError) as e:
            raise DataUnavailableError(
                f"Bundled itinerary unavailable: {self.resource}",
                source=f"{RESOURCE_PACKAGE}/{self.resource}",
                cause=e,
            )
