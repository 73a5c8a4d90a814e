from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    service_base_url: str = "http://localhost:8000"
    analyze_path: str = "/analyze"
    bulk_analyze_path: str = "/bulk-analyze"
    request_timeout_seconds: float | None = None

    client_provider: str = "http"

    download_dir: Path = Path(".")
