"""Dependency injection container.

Explicit registration and resolution of the application's adapters,
without an external framework. Adapters are instantiated on first use,
and tests swap implementations by registering their own factories.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(ItineraryViewService)

        # Testing
        container = Container()
        container.register(ItineraryLoaderPort, lambda: EmbeddedItineraryLoader("..."))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The loader is chosen from ``config.loader.source``.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.geocoding import NominatimGeocoderAdapter
        from .adapters.loader import (
            EmbeddedItineraryLoader,
            FileItineraryLoader,
            HttpItineraryLoader,
        )
        from .adapters.rendering import FoliumDayMapRenderer, HtmlItineraryRenderer
        from .ports.cache import CachePort
        from .ports.geocoding import GeocoderPort
        from .ports.loader import ItineraryLoaderPort
        from .ports.rendering import DayMapRendererPort, ItineraryRendererPort
        from .services import ItineraryViewService

        config = config or get_config()
        container = cls(config=config)

        cache: InMemoryCache[Any] = InMemoryCache(name="geocode", max_size=512)
        container.register(CachePort, lambda: cache)

        def create_loader() -> ItineraryLoaderPort:
            source = config.loader.source
            if source == "http":
                return HttpItineraryLoader(config.loader)
            elif source == "embedded":
                return EmbeddedItineraryLoader()
            else:
                return FileItineraryLoader(config.loader)

        container.register(ItineraryLoaderPort, create_loader)

        container.register(
            GeocoderPort,
            lambda: NominatimGeocoderAdapter(config.geocoding, cache),
        )
        container.register(
            ItineraryRendererPort,
            lambda: HtmlItineraryRenderer(config),
        )
        container.register(
            DayMapRendererPort,
            lambda: FoliumDayMapRenderer(
                container.resolve(GeocoderPort), config.maps
            ),
        )

        def create_service() -> ItineraryViewService:
            return ItineraryViewService(
                loader=container.resolve(ItineraryLoaderPort),
                renderer=container.resolve(ItineraryRendererPort),
                map_renderer=container.resolve(DayMapRendererPort),
                config=config,
            )

        container.register(ItineraryViewService, create_service)

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container (created on first call)."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container. Call this in tests."""
    global _default_container
    with _container_lock:
        _default_container = None
