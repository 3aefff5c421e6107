"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from braillesight.engine.context import TactileGrid


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ConvertResponse(BaseModel):
    rows: list[list[str]] = Field(default_factory=list)
    text: str = ""
    cell_columns: int = 0
    cell_rows: int = 0
    processing_time_ms: float = 0.0

    @classmethod
    def from_grid(cls, grid: TactileGrid, elapsed_ms: float) -> "ConvertResponse":
        return cls(
            rows=grid.rows,
            text=grid.to_text(),
            cell_columns=grid.cell_columns,
            cell_rows=grid.cell_rows,
            processing_time_ms=round(elapsed_ms, 1),
        )


class BrailleTextResponse(BaseModel):
    braille: str


class TranslateResponse(BaseModel):
    translation: str


class DetectResponse(BaseModel):
    language: str


class SpeechLangResponse(BaseModel):
    code: str
    speech_lang: str


class SpeechResponse(BaseModel):
    audio_url: str
    speech_lang: str


class SignResourceModel(BaseModel):
    word: str
    resource_url: str


class SignResponse(BaseModel):
    resources: list[SignResourceModel] = Field(default_factory=list)
