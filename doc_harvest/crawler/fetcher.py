# doc_harvest/crawler/fetcher.py
"""
Fetcher module: one polite GET per call with browser-like headers and response gating.
"""
from __future__ import annotations

import asyncio
from typing import Dict

from aiohttp import ClientError, ClientSession

from doc_harvest.config import CrawlerConfig
from doc_harvest.crawler.models import FetchSkip, PageData, SkipReason
from doc_harvest.logger import logger

#: pages with a shorter body are not worth parsing
MIN_BODY_LENGTH = 100


def build_headers(config: CrawlerConfig) -> Dict[str, str]:
    """Request headers sent with every fetch."""
    return {
        "User-Agent": config.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": config.accept_language,
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


class Fetcher:
    """Sequential HTTP fetching without retries; failures become :class:`FetchSkip`."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str, *, strict: bool = True) -> PageData | FetchSkip:
        """
        GET *url* and return its body.

        With *strict* the response must be ``text/html`` and at least
        :data:`MIN_BODY_LENGTH` characters long; direct fetch mode turns this off.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    logger.info("Failed to fetch %s: %s %s", url, resp.status, resp.reason or "")
                    return FetchSkip(url, SkipReason.STATUS, str(resp.status))

                ctype = resp.headers.get("Content-Type", "")
                if strict and "text/html" not in ctype.lower():
                    logger.info("Skipping non-HTML content: %s (%s)", url, ctype or "no content type")
                    return FetchSkip(url, SkipReason.WRONG_TYPE, ctype)

                text = await resp.text(errors="replace")
        except asyncio.TimeoutError:
            logger.warning("Timed out fetching %s", url)
            return FetchSkip(url, SkipReason.ERROR, "timeout")
        except (ClientError, ValueError) as exc:
            logger.warning("Error fetching %s: %s", url, exc)
            return FetchSkip(url, SkipReason.ERROR, str(exc))

        if strict and len(text) < MIN_BODY_LENGTH:
            logger.info("Skipping page with minimal content: %s (%d chars)", url, len(text))
            return FetchSkip(url, SkipReason.TOO_SMALL, str(len(text)))

        return PageData(url, text)
