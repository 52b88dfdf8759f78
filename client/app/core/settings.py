import os


class Settings:
    def __init__(self):
        self.app_name = "Academix Client"
        self.api_version = "1.0.0"
        self.environment = os.environ.get("ACADEMIX_ENVIRONMENT", "development")
        self.api_base_url = os.environ.get("ACADEMIX_API_BASE_URL", "https://academixstore-backend.onrender.com/api/")
        self.request_timeout_seconds = float(os.environ.get("ACADEMIX_REQUEST_TIMEOUT", "30"))
        self.students_page_size = 20
        self.log_level = os.environ.get("ACADEMIX_LOG_LEVEL", "INFO")
        self.log_format = os.environ.get("ACADEMIX_LOG_FORMAT", "standard")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
