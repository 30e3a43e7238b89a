# File: tests/test_fetcher.py
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from conftest import doc_page, serve_app
from doc_harvest.config import CrawlerConfig
from doc_harvest.crawler.fetcher import Fetcher, build_headers
from doc_harvest.crawler.models import FetchSkip, PageData, SkipReason


@pytest_asyncio.fixture
async def server(unused_tcp_port: int) -> AsyncIterator[tuple[str, dict]]:
    app = web.Application()
    seen: dict = {}

    async def handle_page(request):
        seen["headers"] = dict(request.headers)
        return web.Response(text=doc_page("Page"), content_type="text/html")

    async def handle_missing(_):
        return web.Response(status=404, text="not found")

    async def handle_error(_):
        return web.Response(status=500, text="boom")

    async def handle_plain(_):
        return web.Response(text="x" * 500, content_type="text/plain")

    async def handle_tiny(_):
        return web.Response(text="<p>tiny</p>", content_type="text/html")

    async def handle_untyped(_):
        return web.Response(body=b"<html>" + b"x" * 200 + b"</html>")

    app.router.add_get("/page", handle_page)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/error", handle_error)
    app.router.add_get("/plain", handle_plain)
    app.router.add_get("/tiny", handle_tiny)
    app.router.add_get("/untyped", handle_untyped)

    async for url in serve_app(app, unused_tcp_port):
        yield url, seen


@pytest_asyncio.fixture
async def fetcher() -> AsyncIterator[Fetcher]:
    config = CrawlerConfig(user_agent="TestAgent/1.0")
    async with ClientSession(headers=build_headers(config)) as session:
        yield Fetcher(session)


def test_build_headers():
    headers = build_headers(CrawlerConfig(user_agent="TestAgent/1.0"))
    assert headers["User-Agent"] == "TestAgent/1.0"
    assert headers["Connection"] == "keep-alive"
    assert headers["Upgrade-Insecure-Requests"] == "1"
    assert {"Accept", "Accept-Language", "Accept-Encoding"} <= headers.keys()


@pytest.mark.asyncio()
async def test_fetch_html_page(server, fetcher):
    base, seen = server
    result = await fetcher.fetch(f"{base}/page")
    assert isinstance(result, PageData)
    assert "<title>Page | Example Docs</title>" in result.content
    assert seen["headers"]["User-Agent"] == "TestAgent/1.0"


@pytest.mark.asyncio()
@pytest.mark.parametrize("path,status", [("/missing", "404"), ("/error", "500")])
async def test_non_2xx_is_skipped(server, fetcher, path, status):
    base, _ = server
    result = await fetcher.fetch(f"{base}{path}")
    assert isinstance(result, FetchSkip)
    assert result.reason is SkipReason.STATUS
    assert result.detail == status


@pytest.mark.asyncio()
@pytest.mark.parametrize("path", ["/plain", "/untyped"])
async def test_wrong_content_type_is_skipped(server, fetcher, path):
    base, _ = server
    result = await fetcher.fetch(f"{base}{path}")
    assert isinstance(result, FetchSkip)
    assert result.reason is SkipReason.WRONG_TYPE


@pytest.mark.asyncio()
async def test_small_body_is_skipped(server, fetcher):
    base, _ = server
    result = await fetcher.fetch(f"{base}/tiny")
    assert isinstance(result, FetchSkip)
    assert result.reason is SkipReason.TOO_SMALL


@pytest.mark.asyncio()
async def test_lenient_fetch_skips_only_status(server, fetcher):
    base, _ = server
    assert isinstance(await fetcher.fetch(f"{base}/plain", strict=False), PageData)
    assert isinstance(await fetcher.fetch(f"{base}/tiny", strict=False), PageData)
    assert isinstance(await fetcher.fetch(f"{base}/missing", strict=False), FetchSkip)


@pytest.mark.asyncio()
async def test_network_errors_become_skips(fetcher, unused_tcp_port):
    unreachable = await fetcher.fetch(f"http://localhost:{unused_tcp_port}/nothing")
    assert isinstance(unreachable, FetchSkip)
    assert unreachable.reason is SkipReason.ERROR

    invalid = await fetcher.fetch("not-a-url")
    assert isinstance(invalid, FetchSkip)
    assert invalid.reason is SkipReason.ERROR
