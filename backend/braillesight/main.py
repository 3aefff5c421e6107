"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from braillesight.config import settings
from braillesight.engine.errors import (
    BrailleSightError,
    ImageLoadError,
    InvalidArgumentError,
    RenderContextError,
)

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.braillesight_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[BrailleSightError], int] = {
    InvalidArgumentError: 400,
    ImageLoadError: 422,
    RenderContextError: 500,
}


async def _conversion_error_handler(request: Request, exc: BrailleSightError) -> JSONResponse:
    status = _STATUS_BY_ERROR.get(type(exc), 500)
    logger.warning("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="BrailleSight",
        description="Raster image to 8-dot Braille glyph grid conversion",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BrailleSightError, _conversion_error_handler)

    from braillesight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
