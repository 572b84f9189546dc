"""Application configuration loaded from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Application settings with environment variable loading and sensible defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "github-webhook-receiver"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT

    db_path: str = "./db.sqlite"
    db_pool_size: int = 10

    # Webhook dispatch
    health_check_paths: list[str] = ["/status", "/healthchekc"]
    max_push_body_bytes: int = 64 * 1024

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value: object) -> object:
        """Fall back to the default port when ``PORT`` is not an integer."""
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return DEFAULT_PORT
        return value


settings = Settings()
