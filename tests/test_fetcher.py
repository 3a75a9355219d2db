"""Unit tests for the SVG source fetcher."""

from typing import AsyncIterator

import httpx
import pytest
from respx import MockRouter

from svg_render.exceptions import (
    InvalidContentTypeError,
    ReadFailureError,
    SourceFetchError,
    SourceRequestError,
)
from svg_render.services.fetcher import SourceFetcher

from .conftest import SOURCE_URL, SVG_CONTENT_TYPE


class FailingStream(httpx.AsyncByteStream):
    """Response body that breaks after the headers arrived."""

    async def __aiter__(self):
        yield b"<svg>"
        raise httpx.ReadError("connection reset")


@pytest.fixture
async def fetcher() -> AsyncIterator[SourceFetcher]:
    """Create fetcher with real httpx client for respx mocking."""
    async with httpx.AsyncClient(follow_redirects=True) as http_client:
        yield SourceFetcher(http_client, timeout=5.0)


@pytest.mark.asyncio
async def test_fetch_returns_body(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    respx_mock.get(SOURCE_URL).mock(
        return_value=httpx.Response(200, content=b"<svg>'Hi'</svg>", headers={"Content-Type": SVG_CONTENT_TYPE})
    )

    assert await fetcher.fetch_and_transform(SOURCE_URL) == "<svg>'Hi'</svg>"


@pytest.mark.asyncio
async def test_remove_hyphens_strips_apostrophes(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    respx_mock.get(SOURCE_URL).mock(
        return_value=httpx.Response(200, content=b"<svg>'Hi' - there</svg>", headers={"Content-Type": SVG_CONTENT_TYPE})
    )

    assert await fetcher.fetch_and_transform(SOURCE_URL, remove_hyphens=True) == "<svg>Hi - there</svg>"


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", [
    "image/png",
    "image/svg+xml; charset=utf-8",
    "IMAGE/SVG+XML",
    "text/html",
])
async def test_rejects_other_content_types(
    fetcher: SourceFetcher, respx_mock: MockRouter, content_type: str
) -> None:
    respx_mock.get(SOURCE_URL).mock(
        return_value=httpx.Response(200, content=b"<svg/>", headers={"Content-Type": content_type})
    )

    with pytest.raises(InvalidContentTypeError) as exc_info:
        await fetcher.fetch(SOURCE_URL)

    assert exc_info.value.content_type == content_type


@pytest.mark.asyncio
async def test_missing_content_type_is_rejected(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    respx_mock.get(SOURCE_URL).mock(return_value=httpx.Response(200, content=b"<svg/>"))

    with pytest.raises(InvalidContentTypeError):
        await fetcher.fetch(SOURCE_URL)


@pytest.mark.asyncio
async def test_upstream_status_is_not_inspected(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    respx_mock.get(SOURCE_URL).mock(
        return_value=httpx.Response(404, content=b"<svg>missing</svg>", headers={"Content-Type": SVG_CONTENT_TYPE})
    )

    assert await fetcher.fetch(SOURCE_URL) == "<svg>missing</svg>"


@pytest.mark.asyncio
async def test_follows_redirects(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    target = "https://cdn.example.com/badge.svg"
    respx_mock.get(SOURCE_URL).mock(return_value=httpx.Response(302, headers={"Location": target}))
    respx_mock.get(target).mock(
        return_value=httpx.Response(200, content=b"<svg/>", headers={"Content-Type": SVG_CONTENT_TYPE})
    )

    assert await fetcher.fetch(SOURCE_URL) == "<svg/>"


@pytest.mark.asyncio
async def test_network_error(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    respx_mock.get(SOURCE_URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(SourceRequestError):
        await fetcher.fetch(SOURCE_URL)


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["", "not a url", "ftp://example.com/a.svg"])
async def test_unusable_urls(fetcher: SourceFetcher, url: str) -> None:
    with pytest.raises(SourceFetchError):
        await fetcher.fetch(url)


@pytest.mark.asyncio
async def test_read_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Type": SVG_CONTENT_TYPE}, stream=FailingStream())

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(ReadFailureError):
            await SourceFetcher(http_client).fetch(SOURCE_URL)


@pytest.mark.asyncio
async def test_invalid_utf8_round_trips(fetcher: SourceFetcher, respx_mock: MockRouter) -> None:
    raw = b"<svg>\xff\xfe</svg>"
    respx_mock.get(SOURCE_URL).mock(
        return_value=httpx.Response(200, content=raw, headers={"Content-Type": SVG_CONTENT_TYPE})
    )

    document = await fetcher.fetch(SOURCE_URL)

    assert document.encode("utf-8", errors="surrogateescape") == raw
