from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "remote"

    extraction_endpoint: str = "http://localhost:54321/functions/v1/parse-pdf"
    extraction_api_key: str = ""
    extraction_timeout_seconds: int = 60

    sanitizer_base_url: str = "https://example.com"

    pdf_template: str = "minimal"

    login_max_attempts: int = 5
    login_lockout_minutes: int = 15
    login_attempt_window_minutes: int = 5

    rate_limit_storage_path: str = ".resumekit/rate_limit.json"
    rate_limit_storage_key: str = "login_rate_limit"
