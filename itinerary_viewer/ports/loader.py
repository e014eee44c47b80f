"""Loader port - Abstraction over where the itinerary text comes from."""

from __future__ import annotations

from typing import Protocol


class ItineraryLoaderPort(Protocol):
    """Port for obtaining the raw itinerary text.

    Implementations:
    - adapters/loader/file_loader.py (FileItineraryLoader)
    - adapters/loader/http_loader.py (HttpItineraryLoader)
    - adapters/loader/embedded_loader.py (EmbeddedItineraryLoader)

    A loader has exactly one outcome per call: the full text, or a
    DataUnavailableError. Callers never see the underlying cause type.
    """

    def load_raw_text(self) -> str:
        """Return the whole itinerary source as a single string.

        Raises:
            DataUnavailableError: If the source cannot be read.
        """
        ...
