import logging

from core.config import DEFAULT_DATABASE_URL, Settings, configure_logging, load_settings


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_TIMEOUT", "HTTP_CACHE_EXPIRE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings(use_dotenv=False)

    assert settings == Settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.google_maps_api_key == ""


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://gyms@db/gyms")
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc")
    monkeypatch.setenv("GOOGLE_MAPS_TIMEOUT", "7.5")
    monkeypatch.setenv("HTTP_CACHE_EXPIRE", "60")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings(use_dotenv=False)

    assert settings.database_url == "postgresql://gyms@db/gyms"
    assert settings.google_maps_api_key == "abc"
    assert settings.google_maps_timeout == 7.5
    assert settings.http_cache_expire == 60
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path, monkeypatch):
    # set then delete so the value loaded from .env is undone afterwards
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "placeholder")
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY")
    (tmp_path / ".env").write_text("GOOGLE_MAPS_API_KEY=from-dotenv\n")
    monkeypatch.chdir(tmp_path)

    assert load_settings().google_maps_api_key == "from-dotenv"


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging(Settings(log_level="WARNING"))

    assert calls[0]["level"] == "WARNING"
    assert "%(levelname)s" in calls[0]["format"]
