"""Centralized configuration using Pydantic Settings.

Every tunable of the viewer lives here: where the itinerary comes from,
which header names carry the known fields, how map links are built and
how logging is set up.

Configuration can be overridden via environment variables:
- ITV_LOADER_SOURCE=http
- ITV_LOADER_URL=https://example.org/budapest.csv
- ITV_COLUMN_DAY=Day
- ITV_MAPS_CITY_SUFFIX=Lisboa
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoaderConfig(BaseSettings):
    """Where the raw itinerary text is read from.

    Environment variables prefixed with ITV_LOADER_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_LOADER_")

    source: Literal["file", "http", "embedded"] = "file"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "resources"
    )
    itinerary_file: str = "Budapest.csv"
    url: Optional[str] = None
    timeout_seconds: float = 10.0
    encoding: str = "utf-8"
    delimiter: str = ","

    @property
    def itinerary_path(self) -> Path:
        """Full path to the itinerary CSV file."""
        return self.data_dir / self.itinerary_file


class ColumnConfig(BaseSettings):
    """Header names of the known itinerary fields.

    Environment variables prefixed with ITV_COLUMN_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_COLUMN_")

    day: str = "Día"
    time: str = "Hora"
    activity: str = "Actividad"
    place: str = "Lugar/Detalles"
    transport: str = "Transporte recomendado"
    alternative: str = "Actividad alternativa"


class MapsConfig(BaseSettings):
    """External map links.

    Environment variables prefixed with ITV_MAPS_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_MAPS_")

    search_url: str = "https://www.google.com/maps/search/?api=1&query={query}"
    city_suffix: str = "Budapest"
    excluded_places: Tuple[str, ...] = ("-", "Vuelo IB871.")
    excluded_fragments: Tuple[str, ...] = ("Vuelo de regreso",)
    tourist_map_url: str = (
        "https://www.google.com/maps/d/viewer?mid=1JVUoRs7PIGvjmE6YkXCNVhN3CdI"
        "&hl=en_US&ll=47.48710973413437%2C19.060236999999964&z=12"
    )
    transport_search_url: str = (
        "https://www.google.com/maps/search/Transporte+público+Budapest"
    )


class GeocodingConfig(BaseSettings):
    """Geocoding configuration for the day map.

    Environment variables prefixed with ITV_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_GEO_")

    user_agent: str = "itinerary-viewer"
    language: str = "es"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ITV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.loader.itinerary_path)
        print(config.columns.day)

    Environment variables prefixed with ITV_.
    """

    model_config = SettingsConfigDict(env_prefix="ITV_")

    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    columns: ColumnConfig = Field(default_factory=ColumnConfig)
    maps: MapsConfig = Field(default_factory=MapsConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    title: str = "Tu Viaje a Budapest"
    subtitle: str = "Itinerario personalizado para disfrutar de la ciudad"
    default_day: str = "Domingo"
    loading_message: str = "Cargando itinerario..."
    error_message: str = "No se pudo cargar el itinerario"

    output_dir: Path = Field(default_factory=Path.cwd)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
