"""Image source resolution: bytes, paths, http(s) URLs and data: URLs to raw bytes."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from pathlib import Path
from typing import Union
from urllib.parse import unquote_to_bytes

import httpx

from braillesight.engine.errors import ImageLoadError

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, memoryview, Path, str]

_HTTP_SCHEMES = ("http://", "https://")


def decode_data_url(url: str) -> bytes:
    """Decode an RFC 2397 ``data:`` URL payload."""
    header, sep, payload = url.partition(",")
    if not sep:
        raise ImageLoadError("Failed to load image: malformed data URL")
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageLoadError(f"Failed to load image: bad base64 payload ({e})") from e
    return unquote_to_bytes(payload)


async def fetch_url(
    url: str,
    timeout_seconds: float = 10.0,
    max_bytes: int | None = None,
) -> bytes:
    """GET a remote image without sending credentials of any kind.

    ``trust_env=False`` keeps httpx from picking up ``.netrc`` logins; no
    cookies or auth are attached. The body is streamed and the transfer is
    abandoned as soon as it passes ``max_bytes``.
    """
    chunks: list[bytes] = []
    total = 0
    try:
        async with httpx.AsyncClient(
            timeout=timeout_seconds,
            follow_redirects=True,
            trust_env=False,
        ) as client:
            async with client.stream("GET", url) as response:
                response.raise_for_status()
                declared = response.headers.get("content-length")
                if max_bytes is not None and declared and declared.isdigit():
                    if int(declared) > max_bytes:
                        raise ImageLoadError(
                            f"Failed to load image: {declared} bytes exceeds limit of {max_bytes}"
                        )
                async for chunk in response.aiter_bytes():
                    total += len(chunk)
                    if max_bytes is not None and total > max_bytes:
                        raise ImageLoadError(
                            f"Failed to load image: body exceeds limit of {max_bytes} bytes"
                        )
                    chunks.append(chunk)
    except httpx.HTTPStatusError as e:
        raise ImageLoadError(
            f"Failed to load image: {url} returned {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise ImageLoadError(f"Failed to load image: {e}") from e

    logger.debug("Fetched %s (%d bytes)", url, total)
    return b"".join(chunks)


async def read_source(
    source: ImageSource,
    timeout_seconds: float = 10.0,
    max_bytes: int | None = None,
) -> bytes:
    """Resolve any supported ImageSource to its raw bytes."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    if isinstance(source, str):
        if source.startswith("data:"):
            return decode_data_url(source)
        if source.lower().startswith(_HTTP_SCHEMES):
            return await fetch_url(source, timeout_seconds, max_bytes)
        source = Path(source)

    if isinstance(source, Path):
        try:
            return await asyncio.to_thread(source.read_bytes)
        except OSError as e:
            raise ImageLoadError(f"Failed to load image: {e}") from e

    raise ImageLoadError(f"Unsupported image source type: {type(source).__name__}")
