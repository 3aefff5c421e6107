"""Tests for image source resolution."""

from __future__ import annotations

import asyncio
import base64

import httpx
import pytest

from braillesight.engine import sources
from braillesight.engine.errors import ImageLoadError
from braillesight.engine.sources import decode_data_url, read_source


def _mock_http(monkeypatch, handler):
    """Route every AsyncClient created by the sources module through ``handler``."""
    real_client = httpx.AsyncClient
    seen: list[dict] = []

    def factory(**kwargs):
        seen.append(kwargs)
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(sources.httpx, "AsyncClient", factory)
    return seen


def test_bytes_pass_through():
    assert asyncio.run(read_source(bytearray(b"abc"))) == b"abc"


def test_path_source(tmp_path):
    path = tmp_path / "img.bin"
    path.write_bytes(b"\x89PNG")
    assert asyncio.run(read_source(path)) == b"\x89PNG"
    assert asyncio.run(read_source(str(path))) == b"\x89PNG"


def test_base64_data_url():
    payload = base64.b64encode(b"pixels").decode()
    assert decode_data_url(f"data:image/png;base64,{payload}") == b"pixels"


def test_percent_encoded_data_url():
    assert decode_data_url("data:text/plain,a%20b") == b"a b"


def test_malformed_data_url():
    with pytest.raises(ImageLoadError):
        decode_data_url("data:image/png;base64")
    with pytest.raises(ImageLoadError):
        decode_data_url("data:image/png;base64,@@@")


def test_unsupported_source_type():
    with pytest.raises(ImageLoadError):
        asyncio.run(read_source(12345))


def test_http_fetch_without_credentials(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        assert "cookie" not in request.headers
        assert "authorization" not in request.headers
        return httpx.Response(200, content=b"remote-bytes")

    seen = _mock_http(monkeypatch, handler)
    data = asyncio.run(read_source("https://images.example/cat.png"))
    assert data == b"remote-bytes"
    assert seen[0]["trust_env"] is False
    assert seen[0]["follow_redirects"] is True


def test_http_error_status(monkeypatch):
    _mock_http(monkeypatch, lambda request: httpx.Response(404))
    with pytest.raises(ImageLoadError, match="404"):
        asyncio.run(read_source("http://images.example/missing.png"))


def test_network_failure(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _mock_http(monkeypatch, handler)
    with pytest.raises(ImageLoadError):
        asyncio.run(read_source("http://images.example/cat.png"))


def test_remote_size_limit(monkeypatch):
    # Content-Length is declared for a bytes body, so the header check fires
    _mock_http(monkeypatch, lambda request: httpx.Response(200, content=b"x" * 20))
    with pytest.raises(ImageLoadError, match="20 bytes exceeds"):
        asyncio.run(read_source("http://images.example/big.png", max_bytes=10))


def _chunked_response(chunk_count: int, chunk_size: int, served: list[int]):
    async def body():
        for _ in range(chunk_count):
            served.append(chunk_size)
            yield b"x" * chunk_size

    return lambda request: httpx.Response(200, content=body())


def test_streamed_body_aborts_past_limit(monkeypatch):
    served: list[int] = []
    _mock_http(monkeypatch, _chunked_response(100, 4, served))
    with pytest.raises(ImageLoadError, match="exceeds limit of 10"):
        asyncio.run(read_source("http://images.example/endless.png", max_bytes=10))
    # Third chunk crosses the limit; the rest is never pulled
    assert len(served) == 3


def test_streamed_body_within_limit(monkeypatch):
    served: list[int] = []
    _mock_http(monkeypatch, _chunked_response(3, 4, served))
    data = asyncio.run(read_source("http://images.example/small.png", max_bytes=12))
    assert data == b"x" * 12
