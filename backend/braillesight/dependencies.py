"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from braillesight.config import Settings, settings
from braillesight.engine.config import ConverterConfig
from braillesight.engine.converter import RasterToTactileGridConverter
from braillesight.language.services import InMemoryLanguageServices, LanguageServices


def get_settings() -> Settings:
    return settings


def get_converter(
    app_settings: Settings = Depends(get_settings),
) -> RasterToTactileGridConverter:
    config = ConverterConfig(
        default_width=app_settings.default_output_width,
        max_rows=app_settings.max_output_height,
        resample=app_settings.resample_filter,
    )
    return RasterToTactileGridConverter(
        config=config,
        fetch_timeout_seconds=app_settings.fetch_timeout_seconds,
        max_source_bytes=app_settings.max_upload_bytes,
    )


@lru_cache(maxsize=1)
def get_language_services() -> LanguageServices:
    return InMemoryLanguageServices(
        tts_placeholder_url=settings.tts_placeholder_url,
        sign_resource_base_url=settings.sign_resource_base_url,
    )
