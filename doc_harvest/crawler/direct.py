# doc_harvest/crawler/direct.py
"""
Direct fetch mode: scrape an explicit list of URLs without following links.
"""
from __future__ import annotations

from typing import List, Sequence

from doc_harvest.aggregator import SEPARATOR, format_page
from doc_harvest.crawler.fetcher import Fetcher
from doc_harvest.crawler.models import DirectFetchResult, FetchSkip, PageRecord
from doc_harvest.logger import logger
from doc_harvest.parser.html_parser import extract_plain

#: extracted text must be longer than this to be kept
MIN_DIRECT_CONTENT_LENGTH = 100


async def scrape_specific(urls: Sequence[str], fetcher: Fetcher) -> DirectFetchResult:
    """
    Fetch every URL once and keep the pages with substantial text.

    A failing URL is logged and left out; only an empty input list is an error.
    """
    if not urls:
        return DirectFetchResult(success=False, error="No URLs provided")

    pages: List[PageRecord] = []
    chunks: List[str] = []
    for url in urls:
        logger.info("Scraping specific URL: %s", url)
        try:
            fetched = await fetcher.fetch(url, strict=False)
            if isinstance(fetched, FetchSkip):
                continue
            extracted = extract_plain(fetched.content, fallback_title=url)
        except Exception as exc:
            logger.error("Error scraping %s: %s", url, exc)
            continue

        if len(extracted.content) <= MIN_DIRECT_CONTENT_LENGTH:
            logger.info("Skipping %s: only %d chars of text", url, len(extracted.content))
            continue

        pages.append(PageRecord(url=url, title=extracted.title, content=extracted.content))
        chunks.append(f"{format_page(extracted.title, url, extracted.content)}\n\n{SEPARATOR}\n\n")

    message = f"Successfully scraped {len(pages)} out of {len(urls)} URLs"
    logger.info(message)
    return DirectFetchResult(success=True, pages=pages, total_content="".join(chunks), message=message)
