"""Tests for result sources."""

from unittest.mock import MagicMock

import pytest
from tests.conftest import make_result

from festival.backend.services import ResultsService
from festival.config import FestivalSettings
from festival.sources import get_source
from festival.sources.backend import BackendResultSource
from festival.sources.factory import open_source
from festival.sources.json_file import JsonFileResultSource


class TestJsonFileResultSource:
    def test_fetch(self, results_file):
        results = JsonFileResultSource(results_file).fetch()
        assert len(results) == 7
        assert [r.id for r in results] == ["r3", "r1", "r5", "r4", "r7", "r2", "r6"]

    def test_rows_parsed(self, results_file):
        by_id = {r.id: r for r in JsonFileResultSource(results_file).fetch()}
        assert by_id["r1"].attachments == ["result-photos/r1-a.jpg", "result-photos/r1-b.jpg"]
        assert by_id["r4"].attachments == ["https://example.com/r4.jpg"]
        assert by_id["r7"].event_id is None
        assert by_id["r7"].event_name is None
        assert by_id["r2"].event_category == "Technical"

    def test_get(self, results_file):
        source = JsonFileResultSource(results_file)
        assert source.get("r6").participant == "Team Delta"
        assert source.get("missing") is None

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text('{"id": "r1"}', encoding="utf-8")
        with pytest.raises(ValueError, match="JSON array"):
            JsonFileResultSource(path).fetch()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonFileResultSource(tmp_path / "nope.json").fetch()


class TestBackendResultSource:
    def test_fetch_delegates_to_service(self):
        service = MagicMock(spec=ResultsService)
        service.get_with_events.return_value = [make_result("A", 1)]
        assert BackendResultSource(service).fetch() == [make_result("A", 1)]

    def test_get_uses_indexed_lookup(self):
        service = MagicMock(spec=ResultsService)
        service.get_result.return_value = make_result("A", 1)
        assert BackendResultSource(service).get("r1") == make_result("A", 1)
        service.get_result.assert_called_once_with("r1")
        service.get_with_events.assert_not_called()


class TestRegistry:
    def test_get_source(self, results_file):
        source = get_source("json", results_file)
        assert isinstance(source, JsonFileResultSource)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown result source"):
            get_source("csv")


class TestOpenSource:
    def test_results_file_preferred(self, results_file):
        settings = FestivalSettings(results_file=str(results_file), backend_url="https://x", backend_key="k")
        with open_source(settings) as source:
            assert isinstance(source, JsonFileResultSource)

    def test_backend(self):
        settings = FestivalSettings(results_file=None, backend_url="https://x.example.com", backend_key="k")
        with open_source(settings) as source:
            assert isinstance(source, BackendResultSource)
