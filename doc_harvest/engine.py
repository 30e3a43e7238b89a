# File: doc_harvest/engine.py
"""doc_harvest.engine: Orchestration layer для запуска обхода и прямой загрузки URL."""

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from doc_harvest.config import CrawlerConfig, load_config
from doc_harvest.crawler.crawler import DocCrawler
from doc_harvest.crawler.models import CrawlResult, DirectFetchResult
from doc_harvest.logger import logger

__all__ = ["Engine", "start_crawl", "start_direct"]


async def start_crawl(
    config: CrawlerConfig, start_url: str, max_pages: Optional[int] = None
) -> CrawlResult:
    """Запускает DocCrawler в контексте и возвращает CrawlResult."""
    async with DocCrawler(config) as crawler:
        return await crawler.crawl(start_url, max_pages)


async def start_direct(config: CrawlerConfig, urls: Sequence[str]) -> DirectFetchResult:
    """Загружает явно заданный список URL без перехода по ссылкам."""
    async with DocCrawler(config) as crawler:
        return await crawler.scrape_specific(urls)


class Engine:
    """Синхронный фасад для CLI и тестов: загрузка конфига, обход и прямая загрузка."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlerConfig:
        """Загружает конфиг из YAML/JSON или использует значения по умолчанию."""
        return load_config(path)

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config

    def crawl(self, start_url: str, max_pages: Optional[int] = None) -> CrawlResult:
        """Обходит документацию начиная со start_url."""
        result = asyncio.run(start_crawl(self.config, start_url, max_pages))
        if not result.success:
            logger.error("Crawl of %s failed: %s", start_url, result.error)
        return result

    def scrape_specific(self, urls: Sequence[str]) -> DirectFetchResult:
        """Загружает каждый URL из списка по одному разу."""
        return asyncio.run(start_direct(self.config, urls))
