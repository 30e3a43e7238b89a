# File: tests/conftest.py
from collections.abc import AsyncIterator, Iterable
from typing import Dict, Union

import pytest
from aiohttp import web

from doc_harvest.config import CrawlerConfig
from doc_harvest.crawler.models import FetchSkip, PageData, SkipReason

FILLER = (
    "This paragraph explains the feature in enough detail to count as real "
    "documentation text for the extractor."
)


def doc_page(title: str, text: str = FILLER, links: Iterable[str] = ()) -> str:
    """Build a documentation-like HTML page with links inside the <nav> block."""
    anchors = "".join(f'<a href="{href}">{href}</a>' for href in links)
    return (
        f"<html><head><title>{title} | Example Docs</title></head><body>"
        f"<nav>{anchors}</nav>"
        f"<main><h1>{title}</h1><p>{text}</p></main>"
        "<footer>Copyright Example</footer>"
        "</body></html>"
    )


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


class FakeFetcher:
    """In-memory stand-in for Fetcher: maps URL to HTML, anything else is a 404."""

    def __init__(self, pages: Dict[str, Union[str, FetchSkip]]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    async def fetch(self, url: str, *, strict: bool = True):
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            return FetchSkip(url, SkipReason.STATUS, "404")
        if isinstance(page, FetchSkip):
            return page
        return PageData(url, page)


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """Config without politeness delay so integration tests stay quick."""
    return CrawlerConfig(max_pages=50, delay=0, timeout=5.0, user_agent="TestAgent/1.0")
