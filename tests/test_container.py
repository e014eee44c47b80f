import pytest

from itinerary_viewer.adapters.loader import (
    EmbeddedItineraryLoader,
    FileItineraryLoader,
    HttpItineraryLoader,
)
from itinerary_viewer.adapters.rendering import FoliumDayMapRenderer, HtmlItineraryRenderer
from itinerary_viewer.config import AppConfig, LoaderConfig
from itinerary_viewer.container import Container, get_container, reset_container
from itinerary_viewer.domain.errors import ConfigurationError
from itinerary_viewer.domain.models import ViewStatus
from itinerary_viewer.ports.loader import ItineraryLoaderPort
from itinerary_viewer.ports.rendering import DayMapRendererPort, ItineraryRendererPort
from itinerary_viewer.services import ItineraryViewService


def test_default_bindings():
    container = Container.create_default(AppConfig())

    assert isinstance(container.resolve(ItineraryLoaderPort), FileItineraryLoader)
    assert isinstance(container.resolve(ItineraryRendererPort), HtmlItineraryRenderer)
    assert isinstance(container.resolve(DayMapRendererPort), FoliumDayMapRenderer)


def test_default_service_loads_bundled_sample():
    container = Container.create_default(AppConfig())
    service = container.resolve(ItineraryViewService)

    state = service.load()

    assert state.status is ViewStatus.READY
    assert state.selected_day == "Domingo"
    assert len(state.itinerary) > 0


@pytest.mark.parametrize(
    "loader_config, expected",
    [
        (LoaderConfig(source="embedded"), EmbeddedItineraryLoader),
        (
            LoaderConfig(source="http", url="https://example.org/trip.csv"),
            HttpItineraryLoader,
        ),
    ],
)
def test_loader_follows_configured_source(loader_config, expected):
    container = Container.create_default(AppConfig(loader=loader_config))

    assert isinstance(container.resolve(ItineraryLoaderPort), expected)


def test_http_source_without_url_is_a_configuration_error():
    container = Container.create_default(AppConfig(loader=LoaderConfig(source="http")))

    with pytest.raises(ConfigurationError):
        container.resolve(ItineraryLoaderPort)


def test_override_registration_for_tests(sample_csv):
    container = Container.create_default(AppConfig())
    container.register(ItineraryLoaderPort, lambda: EmbeddedItineraryLoader(sample_csv))

    service = container.resolve(ItineraryViewService)

    assert service.load().itinerary.day_labels == ("Domingo", "Lunes")


def test_singletons_and_unknown_types():
    container = Container()
    container.register(list, list)
    container.register(dict, dict, singleton=False)

    assert container.resolve(list) is container.resolve(list)
    assert container.resolve(dict) is not container.resolve(dict)
    with pytest.raises(KeyError):
        container.resolve(set)


def test_global_container_reset():
    first = get_container()
    assert get_container() is first

    reset_container()
    assert get_container() is not first
