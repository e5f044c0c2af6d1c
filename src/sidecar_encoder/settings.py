from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False  # Auto-reload on code changes (dev only)

    # ---- sidecar (transform utility) ----
    sidecar_path: Path = Path("/shared-bin/sidecar")
    sidecar_timeout: float = Field(10.0, gt=0)  # seconds, also bounds the wait for a slot
    max_concurrent_sidecars: int = Field(16, ge=1)

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_SIDECAR_PATH, APP_LOG_LEVEL, etc.
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Build settings from the APP_* environment and the .env file."""
    return Settings()
