from client.app.core.settings import Settings, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Academix Client"
    assert isinstance(settings.environment, str) and settings.environment
    assert settings.api_base_url.endswith("/api/")
    assert settings.students_page_size == 20
    assert settings.request_timeout_seconds > 0


def test_get_settings_is_a_singleton():
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ACADEMIX_API_BASE_URL", "http://localhost:5000/api/")
    monkeypatch.setenv("ACADEMIX_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("ACADEMIX_LOG_FORMAT", "json")
    settings = Settings()
    assert settings.api_base_url == "http://localhost:5000/api/"
    assert settings.request_timeout_seconds == 5.0
    assert settings.log_format == "json"
