"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    braillesight_env: str = "development"
    braillesight_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Conversion limits
    default_output_width: int = 40
    max_output_width: int = 400
    max_output_height: int = 400
    max_upload_bytes: int = 5 * 1024 * 1024
    fetch_timeout_seconds: float = 10.0
    resample_filter: str = "nearest"

    # Placeholder resources returned by the in-memory language services
    tts_placeholder_url: str = "https://example.com/tts-audio.mp3"
    sign_resource_base_url: str = "https://example.com/sign-language"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
