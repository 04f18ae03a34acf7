"""Tests for the backend HTTP client."""

import httpx
import pytest

from festival.backend.client import BackendClient, BackendError
from festival.config import FestivalSettings


class TestRequests:
    def test_auth_headers(self, client, fake_backend):
        fake_backend.reply(body=[])
        client.select("schedule")
        assert fake_backend.last.headers["apikey"] == "anon-key"
        assert fake_backend.last.headers["authorization"] == "Bearer anon-key"

    def test_select(self, client, fake_backend):
        fake_backend.reply(body=[{"id": "e1"}])
        rows = client.select(
            "schedule",
            filters={"category": "Cultural"},
            order=("date.asc", "time.asc"),
            limit=5,
        )
        assert rows == [{"id": "e1"}]
        request = fake_backend.last
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/schedule"
        assert request.url.params["select"] == "*"
        assert request.url.params["category"] == "eq.Cultural"
        assert request.url.params["order"] == "date.asc,time.asc"
        assert request.url.params["limit"] == "5"

    def test_select_bool_filter(self, client, fake_backend):
        fake_backend.reply(body=[])
        client.select("announcements", filters={"is_active": True})
        assert fake_backend.last.url.params["is_active"] == "eq.true"

    def test_select_without_order_or_limit(self, client, fake_backend):
        fake_backend.reply(body=[])
        client.select("gallery")
        assert "order" not in fake_backend.last.url.params
        assert "limit" not in fake_backend.last.url.params

    def test_select_one(self, client, fake_backend):
        fake_backend.reply(body=[{"id": "r1"}])
        assert client.select_one("results", "r1", columns="id") == {"id": "r1"}
        params = fake_backend.last.url.params
        assert params["id"] == "eq.r1"
        assert params["limit"] == "1"
        assert params["select"] == "id"

    def test_select_one_missing(self, client, fake_backend):
        fake_backend.reply(body=[])
        assert client.select_one("results", "nope") is None

    def test_insert(self, client, fake_backend):
        fake_backend.reply(201, body=[{"id": "g1", "title": "Stage"}])
        row = client.insert("gallery", {"title": "Stage"})
        assert row == {"id": "g1", "title": "Stage"}
        assert fake_backend.last.method == "POST"
        assert fake_backend.last.headers["prefer"] == "return=representation"
        assert fake_backend.last_json() == {"title": "Stage"}

    def test_update(self, client, fake_backend):
        fake_backend.reply(body=[{"id": "a1", "title": "New"}])
        row = client.update("announcements", "a1", {"title": "New"})
        assert row == {"id": "a1", "title": "New"}
        assert fake_backend.last.method == "PATCH"
        assert fake_backend.last.url.params["id"] == "eq.a1"

    def test_update_missing_row(self, client, fake_backend):
        fake_backend.reply(body=[])
        with pytest.raises(BackendError) as exc_info:
            client.update("announcements", "a9", {"title": "New"})
        assert exc_info.value.status_code == 404

    def test_delete(self, client, fake_backend):
        fake_backend.reply(204)
        client.delete("results", "r1")
        assert fake_backend.last.method == "DELETE"
        assert fake_backend.last.url.params["id"] == "eq.r1"

    def test_count(self, client, fake_backend):
        fake_backend.reply(headers={"content-range": "0-24/3573"})
        assert client.count("results") == 3573
        assert fake_backend.last.method == "HEAD"
        assert fake_backend.last.headers["prefer"] == "count=exact"

    def test_count_empty_table(self, client, fake_backend):
        fake_backend.reply(headers={"content-range": "*/0"})
        assert client.count("gallery") == 0

    def test_count_without_header(self, client, fake_backend):
        fake_backend.reply()
        with pytest.raises(BackendError, match="count"):
            client.count("gallery")

    def test_invoke_function(self, client, fake_backend):
        fake_backend.reply(body={"audioContent": "AAAA"})
        assert client.invoke_function("text-to-speech", {"text": "Hi"}) == {"audioContent": "AAAA"}
        assert fake_backend.last.url.path == "/functions/v1/text-to-speech"
        assert fake_backend.last_json() == {"text": "Hi"}


class TestErrors:
    def test_http_error(self, client, fake_backend):
        fake_backend.reply(400, body={"message": "invalid input syntax"})
        with pytest.raises(BackendError, match="invalid input syntax") as exc_info:
            client.select("results")
        assert exc_info.value.status_code == 400

    def test_http_error_plain_text(self, client, fake_backend):
        fake_backend._responses.append(httpx.Response(503, text="Service Unavailable"))
        with pytest.raises(BackendError, match="Service Unavailable") as exc_info:
            client.select("results")
        assert exc_info.value.status_code == 503

    def test_transport_error(self, client, fake_backend):
        fake_backend.fail(httpx.ConnectError("connection refused"))
        with pytest.raises(BackendError, match="connection refused") as exc_info:
            client.select("results")
        assert exc_info.value.status_code is None


class TestFromSettings:
    def test_requires_url_and_key(self):
        with pytest.raises(BackendError, match="FESTIVAL_BACKEND_URL"):
            BackendClient.from_settings(FestivalSettings(backend_url="", backend_key=""))

    def test_builds_client(self):
        settings = FestivalSettings(backend_url="https://x.example.com", backend_key="k")
        with BackendClient.from_settings(settings) as client:
            assert isinstance(client, BackendClient)
