"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertUrlRequest(BaseModel):
    url: str = Field(..., description="http(s) or data: URL of the image")
    width: int | None = Field(default=None, ge=1, description="Output width in glyph cells")
    height: int | None = Field(default=None, ge=1, description="Output height in glyph cells")


class BrailleTextRequest(BaseModel):
    text: str = Field(..., description="Text to transcribe cell by cell")


class TranslateRequest(BaseModel):
    text: str = Field(..., description="Text to translate")
    from_lang: str = Field(default="en", description="Source language code")
    to_lang: str = Field(..., description="Target language code")


class DetectRequest(BaseModel):
    text: str = Field(..., description="Text whose language should be detected")


class SpeechRequest(BaseModel):
    text: str = Field(..., description="Text to speak")
    lang: str = Field(default="en-US", description="BCP-47 speech tag")


class SignRequest(BaseModel):
    text: str = Field(..., description="Text to map to sign resources")
    lang: str = Field(default="en", description="Sign resource language code")
