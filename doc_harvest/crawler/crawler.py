# === FILE: doc_harvest/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import Deque, List, Optional, Sequence, Set

from aiohttp import ClientSession, ClientTimeout

from doc_harvest.config import CrawlerConfig
from doc_harvest.crawler.classifier import build_target
from doc_harvest.crawler.direct import scrape_specific
from doc_harvest.crawler.fetcher import Fetcher, build_headers
from doc_harvest.crawler.link_extractor import extract_links
from doc_harvest.crawler.models import CrawlResult, CrawlTarget, DirectFetchResult, FetchSkip, PageRecord
from doc_harvest.logger import logger
from doc_harvest.parser.html_parser import extract_content
from doc_harvest.utils import strip_fragment

__all__ = ("CrawlSession", "DocCrawler", "MIN_CONTENT_LENGTH")

#: extracted text must be longer than this to be recorded
MIN_CONTENT_LENGTH = 50


class CrawlSession:
    """
    Состояние одного обхода: очередь (frontier), посещённые URL и результаты.

    Обход строго последовательный (BFS): один запрос за раз, фиксированная пауза
    после каждой загруженной страницы. Экземпляр используется один раз.
    """

    def __init__(
        self,
        start_url: str,
        fetcher: Fetcher,
        *,
        max_pages: int = 50,
        delay: float = 0.5,
    ) -> None:
        self.start_url = start_url
        self.fetcher = fetcher
        self.max_pages = max_pages
        self.delay = delay
        self.target: Optional[CrawlTarget] = None
        self.frontier: Deque[str] = deque([start_url])
        self.visited: Set[str] = set()
        self.results: List[PageRecord] = []
        self._finished = False

    async def run(self) -> CrawlResult:
        """Обходит документацию и возвращает CrawlResult (без исключений наружу)."""
        if self._finished:
            raise RuntimeError("CrawlSession can only be run once")
        self._finished = True

        try:
            target = build_target(self.start_url)
            self.target = target
            logger.info("Starting crawl from: %s", self.start_url)
            logger.info("Base domain: %s", target.origin)
            logger.info("Documentation base path: %s", target.base_path)

            start = time.monotonic()
            while self.frontier and len(self.results) < self.max_pages:
                url = strip_fragment(self.frontier.popleft())
                if url in self.visited:
                    continue
                self.visited.add(url)

                try:
                    fetched = await self._process(url, target)
                except Exception as exc:  # per-URL failures never end the crawl
                    logger.error("Error crawling %s: %s", url, exc)
                    continue
                if fetched:
                    await self._throttle()

            duration = time.monotonic() - start
            logger.info(
                "Crawling completed. Found %d pages in %.2f s (%d URLs still queued)",
                len(self.results), duration, len(self.frontier),
            )
        except Exception as exc:
            logger.error("Crawling failed: %s", exc)
            return CrawlResult.failure(str(exc) or type(exc).__name__)

        return CrawlResult(success=True, pages=list(self.results))

    async def _process(self, url: str, target: CrawlTarget) -> bool:
        """
        Fetch, extract and enqueue.

        Returns True when the page was fetched, recorded or not: links of a
        thin page (index, table of contents) are still followed.
        """
        logger.debug("Crawling: %s", url)

        fetched = await self.fetcher.fetch(url)
        if isinstance(fetched, FetchSkip):
            return False

        extracted = extract_content(fetched.content)
        links = extract_links(fetched.content, url, target)

        if len(extracted.content) > MIN_CONTENT_LENGTH:
            self.results.append(
                PageRecord(url=url, title=extracted.title, content=extracted.content, links=tuple(links))
            )
            logger.info(
                "Crawled: %s (%d chars, %d links found)", extracted.title, len(extracted.content), len(links)
            )
        else:
            logger.info("Not recording page without meaningful content: %s", url)

        for link in links:
            if link not in self.visited and link not in self.frontier:
                self.frontier.append(link)
        return True

    async def _throttle(self) -> None:
        await asyncio.sleep(self.delay)


class DocCrawler:
    """Владеет aiohttp-сессией; запускает обходы и прямую загрузку списка URL."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None

    async def __aenter__(self) -> DocCrawler:
        timeout = ClientTimeout(total=self.config.timeout) if self.config.timeout else None
        kwargs = {"timeout": timeout} if timeout else {}
        self.session = ClientSession(
            headers=build_headers(self.config),
            raise_for_status=False,
            **kwargs,
        )
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _require_fetcher(self) -> Fetcher:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        return self.fetcher

    async def crawl(self, start_url: str, max_pages: Optional[int] = None) -> CrawlResult:
        session = CrawlSession(
            start_url,
            self._require_fetcher(),
            max_pages=max_pages if max_pages is not None else self.config.max_pages,
            delay=self.config.delay,
        )
        return await session.run()

    async def scrape_specific(self, urls: Sequence[str]) -> DirectFetchResult:
        return await scrape_specific(urls, self._require_fetcher())
