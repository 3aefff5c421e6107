"""POST /api/convert/*: image to Braille glyph grid."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from braillesight.config import Settings
from braillesight.dependencies import get_converter, get_settings
from braillesight.engine.converter import RasterToTactileGridConverter
from braillesight.engine.errors import InvalidArgumentError
from braillesight.engine.sources import ImageSource
from braillesight.models.requests import ConvertUrlRequest
from braillesight.models.responses import ConvertResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert")


def _resolve_width(width: int | None, settings: Settings) -> int:
    if width is None:
        return settings.default_output_width
    if width > settings.max_output_width:
        raise InvalidArgumentError(
            f"width {width} exceeds the maximum of {settings.max_output_width}"
        )
    return width


def _resolve_height(height: int | None, settings: Settings) -> int | None:
    if height is not None and height > settings.max_output_height:
        raise InvalidArgumentError(
            f"height {height} exceeds the maximum of {settings.max_output_height}"
        )
    return height


async def _convert(
    converter: RasterToTactileGridConverter,
    source: ImageSource,
    width: int,
    height: int | None,
) -> ConvertResponse:
    start = time.perf_counter()
    grid = await converter.convert(source, output_width=width, desired_height=height)
    elapsed = (time.perf_counter() - start) * 1000
    return ConvertResponse.from_grid(grid, elapsed)


@router.post("/image", response_model=ConvertResponse)
async def convert_image(
    file: UploadFile = File(...),
    width: int | None = Form(default=None, ge=1),
    height: int | None = Form(default=None, ge=1),
    converter: RasterToTactileGridConverter = Depends(get_converter),
    settings: Settings = Depends(get_settings),
) -> ConvertResponse:
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=415, detail="Please upload a valid image file.")

    data = await file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes // (1024 * 1024)
        raise HTTPException(
            status_code=413,
            detail=f"Image is too large. Please upload an image smaller than {limit_mb}MB.",
        )

    logger.debug("Upload %s (%s, %d bytes)", file.filename, file.content_type, len(data))
    return await _convert(
        converter, data, _resolve_width(width, settings), _resolve_height(height, settings)
    )


@router.post("/url", response_model=ConvertResponse)
async def convert_url(
    req: ConvertUrlRequest,
    converter: RasterToTactileGridConverter = Depends(get_converter),
    settings: Settings = Depends(get_settings),
) -> ConvertResponse:
    if not req.url.lower().startswith(("http://", "https://", "data:")):
        raise InvalidArgumentError("url must be an http(s) or data: URL")
    return await _convert(
        converter,
        req.url,
        _resolve_width(req.width, settings),
        _resolve_height(req.height, settings),
    )
