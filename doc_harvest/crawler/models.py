# doc_harvest/crawler/models.py
"""
Data models for the DocHarvest crawler.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(slots=True)
class PageData:
    """Holds URL and decoded body of a fetched page."""

    url: str
    content: str


class SkipReason(str, enum.Enum):
    """Why a fetch produced no usable page."""

    STATUS = "status"
    WRONG_TYPE = "wrong-type"
    TOO_SMALL = "too-small"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class FetchSkip:
    url: str
    reason: SkipReason
    detail: str = ""


@dataclass(slots=True, frozen=True)
class CrawlTarget:
    """Origin and documentation base path shared by every accepted URL of one crawl."""

    origin: str
    base_path: str


@dataclass(slots=True, frozen=True)
class PageRecord:
    """One successfully extracted page."""

    url: str
    title: str
    content: str
    links: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "content": self.content,
            "links": list(self.links),
        }


@dataclass(slots=True)
class CrawlResult:
    """Outcome of one crawl session."""

    success: bool
    pages: List[PageRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @classmethod
    def failure(cls, message: str) -> CrawlResult:
        return cls(success=False, pages=[], error=message)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "pages": [p.to_dict() for p in self.pages],
            "totalPages": self.total_pages,
        }
        if not self.success:
            data["error"] = self.error or "Unknown error"
        return data


@dataclass(slots=True)
class DirectFetchResult:
    """Outcome of fetching an explicit URL list without link-following."""

    success: bool
    pages: List[PageRecord] = field(default_factory=list)
    total_content: str = ""
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "pages": [p.to_dict() for p in self.pages],
            "totalPages": self.total_pages,
            "totalContent": self.total_content,
        }
        if self.message is not None:
            data["message"] = self.message
        if self.error is not None:
            data["error"] = self.error
        return data
