"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from braillesight.api import braille, convert, health, language

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(convert.router)
api_router.include_router(braille.router)
api_router.include_router(language.router)
