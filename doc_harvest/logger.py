# File: doc_harvest/logger.py
"""doc_harvest.logger: Общий логгер проекта ``DocHarvest``.

Все модули пишут через один экземпляр :data:`logger`::

    from doc_harvest.logger import logger
    logger.info("Crawling: %s", url)

Консольный вывод идёт в stderr: stdout занят JSON-результатом CLI.
Файл логов (по желанию) ротируется по размеру.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, TextIO, Union

LOGGER_NAME: Final[str] = "DocHarvest"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

#: размер одного файла логов и число архивных копий
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _build_handlers(
    log_file: Union[str, Path, None],
    log_format: str,
    stream: Optional[TextIO],
) -> List[logging.Handler]:
    # sys.stderr читается при каждом вызове: CliRunner и capsys подменяют поток
    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(log_format)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Пере)настраивает логгер проекта.

    level
        Уровень логирования, числом или строкой (``"DEBUG"``).
    log_file
        Путь к файлу логов; *None* — только консоль.
    log_format
        Строка формата для :class:`logging.Formatter`.
    stream
        Поток консольного вывода; по умолчанию текущий ``sys.stderr``.
    replace_handlers
        *True* — старые обработчики закрываются и удаляются.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(log_file, log_format, stream):
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Вызывается CLI один раз на запуск."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "logger", "configure", "init_logging"]
