"""Tests for settings loading."""

from festival.config import FestivalSettings, get_settings


class TestFestivalSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("BACKEND_URL", "ADMIN_PASSWORD", "LEADERBOARD_LIMIT", "RESULTS_FILE"):
            monkeypatch.delenv(f"FESTIVAL_{name}", raising=False)
        settings = FestivalSettings()
        assert settings.backend_url == ""
        assert settings.admin_username == "admin"
        assert settings.admin_password == ""
        assert settings.session_ttl_hours == 24
        assert settings.leaderboard_limit == 50
        assert settings.default_template == "modern"
        assert settings.results_file is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("FESTIVAL_BACKEND_URL", "https://festival.example.com")
        monkeypatch.setenv("FESTIVAL_LEADERBOARD_LIMIT", "10")
        settings = FestivalSettings()
        assert settings.backend_url == "https://festival.example.com"
        assert settings.leaderboard_limit == 10

    def test_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("FESTIVAL_DEFAULT_TEMPLATE", raising=False)
        (tmp_path / ".env").write_text("FESTIVAL_DEFAULT_TEMPLATE=neon\n", encoding="utf-8")
        assert FestivalSettings().default_template == "neon"

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
