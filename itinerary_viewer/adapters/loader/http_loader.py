"""HTTP itinerary loader adapter.

Fetches the CSV from a URL (a published spreadsheet export, a raw file
in a repository, ...) through a requests Session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests

from ...config import LoaderConfig, get_config
from ...domain.errors import ConfigurationError, DataUnavailableError


@dataclass
class HttpItineraryLoader:
    """Downloads the itinerary text from ``config.url``.

    Attributes:
        config: Loader configuration (URL, timeout, encoding)
        session: HTTP session, injectable for tests
    """

    config: LoaderConfig = field(default_factory=lambda: get_config().loader)
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.url:
            raise ConfigurationError(
                "An itinerary URL is required for the HTTP loader",
                setting_name="ITV_LOADER_URL",
            )

    def load_raw_text(self) -> str:
        """Download the itinerary.

        Raises:
            DataUnavailableError: On connection errors, timeouts and
                non-2xx responses.
        """
        url = self.config.url or ""
        self._logger.debug("Downloading itinerary", extra={"url": url})

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            self._logger.error(
                "Failed to download itinerary",
                extra={"url": url, "error": str(e)},
            )
            raise DataUnavailableError(
                f"Itinerary download failed: {url}",
                source=url,
                cause=e,
            )

        response.encoding = self.config.encoding
        text = response.text
        self._logger.info(
            "Itinerary downloaded",
            extra={"url": url, "chars": len(text)},
        )
        return text
