# File: doc_harvest/utils.py
"""doc_harvest.utils: Утилитарные функции для разбора и нормализации URL."""

from __future__ import annotations

from typing import Collection, List, Sequence
from urllib.parse import urlsplit, urlunsplit

from doc_harvest.logger import logger

__all__: Sequence[str] = (
    "url_origin",
    "url_path",
    "remove_dot_segments",
    "normalize_url",
    "strip_fragment",
    "remove_duplicates",
)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def url_origin(url: str) -> str:
    """Возвращает origin (scheme://host[:port]) в нижнем регистре.

    Порт по умолчанию для схемы опускается. Для URL без http(s)-схемы или хоста
    бросает ValueError.
    """
    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()
    host = parts.hostname
    if scheme not in _DEFAULT_PORTS or not host:
        raise ValueError(f"Invalid URL: {url!r}")
    port = parts.port  # ValueError на нечисловом/вне диапазона порте
    if ":" in host:
        host = f"[{host}]"
    if port is None or port == _DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def url_path(url: str) -> str:
    """Путь URL; пустой путь считается корнем ``/``."""
    return urlsplit(url.strip()).path or "/"


def remove_dot_segments(path: str) -> str:
    """Убирает сегменты ``.`` и ``..`` из пути (RFC 3986, 5.2.4); выше корня не поднимается."""
    segments = path.split("/")
    resolved: List[str] = []
    for segment in segments:
        if segment == "..":
            if len(resolved) > 1:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)
    if segments[-1] in (".", ".."):
        resolved.append("")
    return "/".join(resolved)


def normalize_url(url: str) -> str:
    """URL с нормализованным путём; остальные части не меняются."""
    parts = urlsplit(url)
    path = remove_dot_segments(parts.path)
    if path == parts.path:
        return url
    return urlunsplit(parts._replace(path=path))


def strip_fragment(url: str) -> str:
    """Отрезает ``#fragment`` от URL."""
    return url.split("#", 1)[0]


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
