"""File itinerary loader adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import LoaderConfig, get_config
from ...domain.errors import DataUnavailableError


@dataclass
class FileItineraryLoader:
    """Reads the itinerary CSV from ``config.itinerary_path``.

    Attributes:
        config: Loader configuration (directory, file name, encoding)
    """

    config: LoaderConfig = field(default_factory=lambda: get_config().loader)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_raw_text(self) -> str:
        """Read the whole file.

        Raises:
            DataUnavailableError: If the file is missing, unreadable or
                not valid in the configured (or an unknown) encoding.
        """
        path = self.config.itinerary_path
        self._logger.debug("Reading itinerary file", extra={"path": str(path)})

        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, LookupError, UnicodeDecodeError) as e:
            self._logger.error(
                "Failed to read itinerary file",
                extra={"path": str(path), "error": str(e)},
            )
            raise DataUnavailableError(
                f"Itinerary file unavailable: {path}",
                source=str(path),
                cause=e,
            )

        self._logger.info(
            "Itinerary file read",
            extra={"path": str(path), "chars": len(text)},
        )
        return text
