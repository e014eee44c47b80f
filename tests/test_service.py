from pathlib import Path
from unittest.mock import MagicMock

import pytest

from itinerary_viewer.adapters.loader import EmbeddedItineraryLoader, FileItineraryLoader
from itinerary_viewer.adapters.rendering import HtmlItineraryRenderer
from itinerary_viewer.config import AppConfig, ColumnConfig, LoaderConfig
from itinerary_viewer.domain.errors import DataUnavailableError, RenderingError
from itinerary_viewer.domain.models import ItineraryViewState, ViewStatus
from itinerary_viewer.services import ItineraryViewService


@pytest.fixture
def config():
    return AppConfig()


def _service(loader, config, map_renderer=None):
    return ItineraryViewService(
        loader=loader,
        renderer=HtmlItineraryRenderer(config),
        map_renderer=map_renderer,
        config=config,
    )


class TestLoad:
    def test_successful_load_is_ready_on_first_day(self, sample_csv, config):
        service = _service(EmbeddedItineraryLoader(sample_csv), config)

        state = service.load()

        assert state.status is ViewStatus.READY
        assert state.itinerary.day_labels == ("Domingo", "Lunes")
        assert state.selected_day == "Domingo"
        assert state.error is None

    def test_loader_called_exactly_once(self, sample_csv, config):
        loader = MagicMock()
        loader.load_raw_text.return_value = sample_csv

        _service(loader, config).load()

        loader.load_raw_text.assert_called_once_with()

    def test_failure_becomes_generic_error_state(self, config):
        loader = MagicMock()
        loader.load_raw_text.side_effect = DataUnavailableError(
            "Permission denied", source="/secret.csv"
        )

        state = _service(loader, config).load()

        assert state.status is ViewStatus.ERROR
        assert state.error == "No se pudo cargar el itinerario"
        assert state.itinerary.is_empty

    def test_header_only_is_ready_with_default_day(self, config):
        state = _service(EmbeddedItineraryLoader("Día,Hora"), config).load()

        assert state.status is ViewStatus.READY
        assert state.itinerary.is_empty
        assert state.selected_day == "Domingo"

    def test_unknown_encoding_ends_in_error_state(self, config, tmp_path, sample_csv):
        (tmp_path / "viaje.csv").write_text(sample_csv, encoding="utf-8")
        loader = FileItineraryLoader(
            LoaderConfig(
                data_dir=tmp_path, itinerary_file="viaje.csv", encoding="no-such-codec"
            )
        )

        state = _service(loader, config).load()

        assert state.status is ViewStatus.ERROR
        assert state.error == "No se pudo cargar el itinerario"

    def test_configured_columns_are_used(self):
        config = AppConfig(columns=ColumnConfig(day="Day", activity="What"))
        service = _service(EmbeddedItineraryLoader("Day,What\nMon,Museum"), config)

        state = service.load()

        assert state.selected_day == "Mon"
        assert service.visible_records(state)[0].activity == "Museum"


class TestSelection:
    def test_select_day_filters_records(self, sample_csv, config):
        service = _service(EmbeddedItineraryLoader(sample_csv), config)
        state = service.select_day(service.load(), "Lunes")

        records = service.visible_records(state)

        assert [r.time for r in records] == ["09:00", "20:00"]

    def test_select_unknown_day_shows_nothing(self, sample_csv, config):
        service = _service(EmbeddedItineraryLoader(sample_csv), config)
        state = service.select_day(service.load(), "Viernes")

        assert service.visible_records(state) == ()

    def test_selection_ignored_unless_ready(self, config):
        service = _service(EmbeddedItineraryLoader(resource=None), config)
        state = service.load()

        assert service.select_day(state, "Lunes") is state
        assert service.visible_records(state) == ()


class TestRender:
    def test_render_delegates_to_renderer(self, sample_csv, config):
        renderer = MagicMock()
        renderer.render.return_value = "<div/>"
        service = ItineraryViewService(
            loader=EmbeddedItineraryLoader(sample_csv),
            renderer=renderer,
            config=config,
        )
        state = service.load()

        assert service.render(state) == "<div/>"
        renderer.render.assert_called_once_with(state)

    def test_initial_state_renders_loading(self, config):
        service = _service(EmbeddedItineraryLoader(""), config)

        assert "Cargando itinerario..." in service.render(service.initial_state())

    def test_day_map_uses_visible_records(self, sample_csv, config, tmp_path):
        map_renderer = MagicMock()
        map_renderer.render.side_effect = lambda records, path: path
        service = _service(EmbeddedItineraryLoader(sample_csv), config, map_renderer)
        state = service.select_day(service.load(), "Lunes")

        result = service.render_day_map(state, tmp_path / "map.html")

        assert result == tmp_path / "map.html"
        records, _ = map_renderer.render.call_args.args
        assert [r.day for r in records] == ["Lunes", "Lunes"]

    def test_day_map_none_without_records_or_renderer(self, sample_csv, config):
        map_renderer = MagicMock()
        service = _service(EmbeddedItineraryLoader(sample_csv), config, map_renderer)
        empty_day = service.select_day(service.load(), "Viernes")

        assert service.render_day_map(empty_day) is None
        assert _service(EmbeddedItineraryLoader(sample_csv), config).render_day_map(
            service.load()
        ) is None
        map_renderer.render.assert_not_called()

    def test_day_map_errors_propagate(self, sample_csv, config, tmp_path):
        map_renderer = MagicMock()
        map_renderer.render.side_effect = RenderingError("nothing located")
        service = _service(EmbeddedItineraryLoader(sample_csv), config, map_renderer)

        with pytest.raises(RenderingError):
            service.render_day_map(service.load(), Path(tmp_path) / "m.html")


def test_states_are_independent_per_view(sample_csv, config):
    service = _service(EmbeddedItineraryLoader(sample_csv), config)
    view_a = service.load()
    view_b = service.load()

    view_a = service.select_day(view_a, "Lunes")

    assert view_a.selected_day == "Lunes"
    assert view_b.selected_day == "Domingo"
    assert isinstance(view_b, ItineraryViewState)
