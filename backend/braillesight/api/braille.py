"""POST /api/braille/text: text to Braille characters."""

from __future__ import annotations

from fastapi import APIRouter

from braillesight.models.requests import BrailleTextRequest
from braillesight.models.responses import BrailleTextResponse
from braillesight.text.braille_table import text_to_braille

router = APIRouter(prefix="/braille")


@router.post("/text", response_model=BrailleTextResponse)
async def braille_text(req: BrailleTextRequest) -> BrailleTextResponse:
    return BrailleTextResponse(braille=text_to_braille(req.text))
