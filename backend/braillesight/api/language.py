"""Language collaborator endpoints: translation, detection, speech, sign."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from braillesight.dependencies import get_language_services
from braillesight.language.services import LanguageServices
from braillesight.language.tables import speech_synthesis_lang
from braillesight.models.requests import DetectRequest, SignRequest, SpeechRequest, TranslateRequest
from braillesight.models.responses import (
    DetectResponse,
    SignResourceModel,
    SignResponse,
    SpeechLangResponse,
    SpeechResponse,
    TranslateResponse,
)

router = APIRouter(prefix="/language")


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    req: TranslateRequest,
    services: LanguageServices = Depends(get_language_services),
) -> TranslateResponse:
    translation = await services.translate(req.text, req.from_lang, req.to_lang)
    return TranslateResponse(translation=translation)


@router.post("/detect", response_model=DetectResponse)
async def detect(
    req: DetectRequest,
    services: LanguageServices = Depends(get_language_services),
) -> DetectResponse:
    return DetectResponse(language=await services.detect_language(req.text))


@router.get("/speech/{code}", response_model=SpeechLangResponse)
async def speech_lang(code: str) -> SpeechLangResponse:
    return SpeechLangResponse(code=code, speech_lang=speech_synthesis_lang(code))


@router.post("/tts", response_model=SpeechResponse)
async def text_to_speech(
    req: SpeechRequest,
    services: LanguageServices = Depends(get_language_services),
) -> SpeechResponse:
    audio_url = await services.text_to_speech_url(req.text, req.lang)
    return SpeechResponse(audio_url=audio_url, speech_lang=req.lang)


@router.post("/sign", response_model=SignResponse)
async def sign(
    req: SignRequest,
    services: LanguageServices = Depends(get_language_services),
) -> SignResponse:
    resources = await services.text_to_sign_language(req.text, req.lang)
    return SignResponse(
        resources=[SignResourceModel(word=r.word, resource_url=r.resource_url) for r in resources]
    )
