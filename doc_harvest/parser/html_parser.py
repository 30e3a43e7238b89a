# === FILE: doc_harvest/parser/html_parser.py ===
"""HTML content extraction for DocHarvest.

Two entry points share the same BeautifulSoup parsing:

* :func:`extract_content` — used while crawling. Strips boilerplate
  (scripts, styles, navigation, header/footer, sidebars, comments), then
  looks for the main documentation region in a fixed order:

  1. ``<main>``
  2. ``<article>``
  3. ``<div>`` whose ``class`` mentions content/documentation/docs/main
  4. ``<div>`` whose ``id`` mentions the same words

  The first region whose markup is longer than :data:`MIN_REGION_LENGTH`
  characters wins; otherwise the whole cleaned document is used.

* :func:`extract_plain` — used by direct fetch mode. No boilerplate
  heuristics beyond dropping scripts and styles, and the raw ``<title>``.

Both functions never raise on malformed markup.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Optional

from bs4 import BeautifulSoup
from bs4.element import Comment, Tag

__all__: Sequence[str] = (
    "ExtractedContent",
    "MIN_REGION_LENGTH",
    "NO_TITLE",
    "extract_content",
    "extract_plain",
    "normalize_text",
)

NO_TITLE = "No Title"
MIN_REGION_LENGTH = 100

_BOILERPLATE_TAGS = ("script", "style", "nav", "header", "footer", "aside")
_BOILERPLATE_CLASS_RE = re.compile(r"nav|menu|sidebar|breadcrumb|pagination", re.IGNORECASE)
_CONTENT_ATTR_RE = re.compile(r"content|documentation|docs|main", re.IGNORECASE)
_TITLE_SUFFIX_RE = re.compile(r"\s*[|\-–]\s*.*$", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class ExtractedContent:
    title: str
    content: str


def normalize_text(text: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _attr_text(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _raw_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag is None:
        return ""
    return title_tag.get_text().strip()


def _clean_title(raw: str) -> str:
    title = _TITLE_SUFFIX_RE.sub("", raw).strip()
    return title or NO_TITLE


def _remove_boilerplate(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(list(_BOILERPLATE_TAGS)):
        if not tag.decomposed:
            tag.decompose()

    menus = soup.find_all(
        lambda t: t.name == "div" and bool(_BOILERPLATE_CLASS_RE.search(_attr_text(t, "class")))
    )
    for tag in menus:
        if not tag.decomposed:
            tag.decompose()

    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()


def _region_finders() -> Sequence[Callable[[BeautifulSoup], Optional[Tag]]]:
    return (
        lambda soup: soup.find("main"),
        lambda soup: soup.find("article"),
        lambda soup: soup.find(
            lambda t: t.name == "div" and bool(_CONTENT_ATTR_RE.search(_attr_text(t, "class")))
        ),
        lambda soup: soup.find(
            lambda t: t.name == "div" and bool(_CONTENT_ATTR_RE.search(_attr_text(t, "id")))
        ),
    )


def _select_region(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    for finder in _region_finders():
        region = finder(soup)
        if region is not None and len(region.decode_contents().strip()) > MIN_REGION_LENGTH:
            return region
    return soup


def extract_content(html: str) -> ExtractedContent:
    """Return the cleaned title and main readable text of a documentation page."""
    soup = BeautifulSoup(html or "", "html.parser")
    title = _clean_title(_raw_title(soup))

    # the title is metadata, not body text
    for tag in soup.find_all(["head", "title"]):
        if not tag.decomposed:
            tag.decompose()

    _remove_boilerplate(soup)
    region = _select_region(soup)
    content = normalize_text(region.get_text(" "))
    return ExtractedContent(title=title, content=content)


def extract_plain(html: str, fallback_title: str) -> ExtractedContent:
    """Simpler extraction: raw ``<title>`` (or *fallback_title*) and all visible text."""
    soup = BeautifulSoup(html or "", "html.parser")
    title = _raw_title(soup) or fallback_title

    for tag in soup.find_all(["script", "style"]):
        if not tag.decomposed:
            tag.decompose()

    return ExtractedContent(title=title, content=normalize_text(soup.get_text(" ")))
