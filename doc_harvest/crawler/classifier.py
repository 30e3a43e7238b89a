# doc_harvest/crawler/classifier.py
"""
URL scope decisions for a documentation crawl.

A crawl only follows URLs that share the start URL's origin, live under the
documentation base path inferred from the start URL, and contain none of the
:data:`EXCLUDED_PATTERNS` tokens.
"""
from __future__ import annotations

from typing import Sequence

from doc_harvest.crawler.models import CrawlTarget
from doc_harvest.utils import remove_dot_segments, url_origin, url_path

__all__: Sequence[str] = (
    "DOC_KEYWORDS",
    "EXCLUDED_PATTERNS",
    "build_target",
    "infer_base_path",
    "is_in_scope",
)

#: substrings that mark a path segment as the root of a documentation tree
DOC_KEYWORDS: Sequence[str] = ("doc", "guide", "api", "help", "manual", "reference")

EXCLUDED_PATTERNS: Sequence[str] = (
    # binaries and archives
    ".pdf", ".zip", ".tar", ".gz", ".exe", ".dmg",
    # auth and meta pages
    "/search", "/login", "/logout", "/signup", "/register",
    "/contact", "/about", "/privacy", "/terms",
    # static assets
    ".css", ".js", ".png", ".jpg", ".jpeg", ".gif", ".svg",
    # non-navigable
    "#", "javascript:", "mailto:", "tel:",
)


def infer_base_path(start_url: str) -> str:
    """
    Guess the documentation root from the start URL path.

    The first segment containing one of :data:`DOC_KEYWORDS` (plain substring,
    case-sensitive, so ``"apical"`` matches ``"api"``) ends the prefix. Without
    such a segment the last segment is dropped, unless the path has only one.
    """
    path = url_path(start_url)
    segments = [s for s in path.split("/") if s]

    for segment in segments:
        if any(keyword in segment for keyword in DOC_KEYWORDS):
            return path[: path.index(segment) + len(segment)]

    if len(segments) > 1:
        return "/" + "/".join(segments[:-1])
    return path


def build_target(start_url: str) -> CrawlTarget:
    """Build the immutable crawl target; raises ValueError for a non-http(s) start URL."""
    return CrawlTarget(origin=url_origin(start_url), base_path=infer_base_path(start_url))


def is_in_scope(candidate_url: str, target: CrawlTarget) -> bool:
    """Return True if *candidate_url* belongs to the crawl described by *target*."""
    try:
        origin = url_origin(candidate_url)
        path = remove_dot_segments(url_path(candidate_url))
    except ValueError:
        return False

    if origin != target.origin:
        return False
    if not path.lower().startswith(target.base_path.lower()):
        return False

    lowered = candidate_url.lower()
    return not any(pattern in lowered for pattern in EXCLUDED_PATTERNS)
