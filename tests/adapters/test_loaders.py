"""Tests for the itinerary loader adapters."""

from unittest.mock import MagicMock

import pytest
import requests

from itinerary_viewer.adapters.loader import (
    EmbeddedItineraryLoader,
    FileItineraryLoader,
    HttpItineraryLoader,
)
from itinerary_viewer.config import LoaderConfig
from itinerary_viewer.domain.errors import ConfigurationError, DataUnavailableError


class TestFileItineraryLoader:
    def test_reads_configured_file(self, tmp_path, sample_csv):
        (tmp_path / "viaje.csv").write_text(sample_csv, encoding="utf-8")
        loader = FileItineraryLoader(
            LoaderConfig(data_dir=tmp_path, itinerary_file="viaje.csv")
        )

        assert loader.load_raw_text() == sample_csv

    def test_missing_file_is_data_unavailable(self, tmp_path):
        loader = FileItineraryLoader(
            LoaderConfig(data_dir=tmp_path, itinerary_file="nope.csv")
        )

        with pytest.raises(DataUnavailableError) as excinfo:
            loader.load_raw_text()

        assert excinfo.value.source.endswith("nope.csv")
        assert isinstance(excinfo.value.cause, FileNotFoundError)

    def test_invalid_encoding_is_data_unavailable(self, tmp_path):
        (tmp_path / "bad.csv").write_bytes(b"D\xeda,Hora\n")
        loader = FileItineraryLoader(
            LoaderConfig(data_dir=tmp_path, itinerary_file="bad.csv")
        )

        with pytest.raises(DataUnavailableError):
            loader.load_raw_text()

    def test_unknown_encoding_is_data_unavailable(self, tmp_path, sample_csv):
        (tmp_path / "viaje.csv").write_text(sample_csv, encoding="utf-8")
        loader = FileItineraryLoader(
            LoaderConfig(
                data_dir=tmp_path, itinerary_file="viaje.csv", encoding="no-such-codec"
            )
        )

        with pytest.raises(DataUnavailableError) as excinfo:
            loader.load_raw_text()

        assert isinstance(excinfo.value.cause, LookupError)

    def test_bundled_sample_is_readable(self):
        text = FileItineraryLoader(LoaderConfig()).load_raw_text()

        assert text.splitlines()[0].startswith("Día,Hora,Actividad")


class TestHttpItineraryLoader:
    @pytest.fixture
    def config(self):
        return LoaderConfig(url="https://example.org/trip.csv", timeout_seconds=3)

    def test_returns_response_text(self, config, sample_csv):
        session = MagicMock()
        session.get.return_value.text = sample_csv

        loader = HttpItineraryLoader(config, session=session)

        assert loader.load_raw_text() == sample_csv
        session.get.assert_called_once_with("https://example.org/trip.csv", timeout=3)
        assert session.get.return_value.encoding == "utf-8"

    def test_http_error_is_data_unavailable(self, config):
        session = MagicMock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")

        loader = HttpItineraryLoader(config, session=session)

        with pytest.raises(DataUnavailableError) as excinfo:
            loader.load_raw_text()
        assert excinfo.value.source == "https://example.org/trip.csv"

    def test_connection_error_is_data_unavailable(self, config):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("offline")

        loader = HttpItineraryLoader(config, session=session)

        with pytest.raises(DataUnavailableError):
            loader.load_raw_text()

    def test_url_is_required(self):
        with pytest.raises(ConfigurationError):
            HttpItineraryLoader(LoaderConfig())


class TestEmbeddedItineraryLoader:
    def test_returns_text(self):
        assert EmbeddedItineraryLoader("a,b\n1,2").load_raw_text() == "a,b\n1,2"

    def test_empty_text_is_still_text(self):
        assert EmbeddedItineraryLoader("").load_raw_text() == ""

    def test_reads_bundled_resource(self):
        text = EmbeddedItineraryLoader().load_raw_text()

        assert text.startswith("Día,Hora")
        assert "Domingo" in text

    def test_missing_resource_is_data_unavailable(self):
        with pytest.raises(DataUnavailableError):
            EmbeddedItineraryLoader(resource="Lisboa.csv").load_raw_text()

    def test_nothing_to_load(self):
        with pytest.raises(DataUnavailableError):
            EmbeddedItineraryLoader(resource=None).load_raw_text()
