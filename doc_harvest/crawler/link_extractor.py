# doc_harvest/crawler/link_extractor.py
"""
Link extraction for documentation crawls.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from doc_harvest.crawler.classifier import is_in_scope
from doc_harvest.crawler.models import CrawlTarget
from doc_harvest.logger import logger
from doc_harvest.utils import normalize_url, remove_duplicates, strip_fragment

_SKIP_PREFIXES = ("javascript:", "mailto:", "tel:")


def resolve_href(href: str, current_url: str, origin: str) -> str | None:
    """
    Turn an ``href`` into an absolute URL without fragment and without
    ``.``/``..`` path segments.

    Returns None for hrefs that are not navigable (empty, ``#``,
    ``javascript:``, ``mailto:``, ``tel:``, non-http schemes).
    """
    href = href.strip()
    if not href or href == "#" or href.startswith(_SKIP_PREFIXES):
        return None

    if href.startswith(("http://", "https://")):
        absolute = href
    elif href.startswith("/"):
        absolute = origin + href
    elif "://" in href:
        return None
    else:
        absolute = urljoin(current_url, href)

    return strip_fragment(normalize_url(absolute))


def extract_links(html: str, current_url: str, target: CrawlTarget) -> List[str]:
    """
    Extract in-scope documentation links from *html*.

    Links are absolute, fragment-free and unique; the first-seen order is kept.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute = resolve_href(href_val, current_url, target.origin)
        except ValueError as exc:
            logger.debug("Skipping malformed href %r on %s: %s", href_val, current_url, exc)
            continue
        if absolute and is_in_scope(absolute, target):
            links.append(absolute)
    return remove_duplicates(links)
