# File: doc_harvest/aggregator.py
"""doc_harvest.aggregator: Сборка единого корпуса текста и статистики по результатам обхода."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, TypedDict

from doc_harvest.crawler.models import CrawlResult, PageRecord

__all__ = [
    "SEPARATOR",
    "ContentSummary",
    "PageLength",
    "aggregate_content",
    "extract_documentation_urls",
    "format_for_generation",
    "format_page",
    "summarize",
]

SEPARATOR = "=" * 80


class PageLength(TypedDict):
    """Длина текста одной страницы."""

    title: str
    url: str
    length: int


@dataclass(slots=True)
class ContentSummary:
    """Сводная статистика по страницам; пересчитывается по запросу и не хранится."""

    total_pages: int = 0
    total_characters: int = 0
    total_words: int = 0
    average_page_length: int = 0
    pages_by_length: List[PageLength] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalPages": self.total_pages,
            "totalCharacters": self.total_characters,
            "totalWords": self.total_words,
            "averagePageLength": self.average_page_length,
            "pagesByLength": [dict(p) for p in self.pages_by_length],
        }


def format_page(title: str, url: str, content: str) -> str:
    """Заголовок страницы, её URL и текст в формате корпуса."""
    return f"=== {title} ===\nURL: {url}\n\n{content}"


def aggregate_content(pages: Sequence[PageRecord]) -> str:
    """Склеивает страницы в один документ, разделяя их строкой из 80 ``=``."""
    return f"\n\n{SEPARATOR}\n\n".join(format_page(p.title, p.url, p.content) for p in pages)


def summarize(pages: Sequence[PageRecord]) -> ContentSummary:
    """Считает символы, слова, среднюю длину и ранжирует страницы по длине текста."""
    total_characters = sum(len(p.content) for p in pages)
    total_words = sum(len(p.content.split()) for p in pages)
    # half-up rounding
    average = math.floor(total_characters / len(pages) + 0.5) if pages else 0

    by_length: List[PageLength] = sorted(
        ({"title": p.title, "url": p.url, "length": len(p.content)} for p in pages),
        key=lambda item: item["length"],
        reverse=True,
    )
    return ContentSummary(
        total_pages=len(pages),
        total_characters=total_characters,
        total_words=total_words,
        average_page_length=average,
        pages_by_length=by_length,
    )


def extract_documentation_urls(result: CrawlResult) -> List[str]:
    """URL всех страниц результата в порядке обхода."""
    return [p.url for p in result.pages]


def format_for_generation(pages: Sequence[PageRecord], prompt: str, user_request: str) -> str:
    """Текст для внешнего сервиса генерации: инструкция, запрос пользователя и корпус."""
    return f"{prompt}\n\nUser request: {user_request}\n\nDocumentation: {aggregate_content(pages)}"
