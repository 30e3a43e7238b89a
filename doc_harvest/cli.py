# === FILE: doc_harvest/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера документации DocHarvest через командную строку.

Команды:
  crawl URL     Обойти документацию начиная с URL и вывести/сохранить результат
  fetch URL...  Загрузить явно заданные страницы без перехода по ссылкам
  config        Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --limit INT         Макс. число страниц для обхода (override max_pages)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Опции crawl / fetch:
  --json PATH         Сохранить JSON-результат в файл
  --corpus PATH       Сохранить агрегированный текст корпуса в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --summary           Добавить статистику по страницам (только crawl)
  --crawl-timeout SEC Таймаут всего обхода (секунд, только crawl)

Дополнительно:
  --version, -v       Показать версию DocHarvest

Пример:
  doc-harvest --limit 20 crawl https://docs.example.com/guide/start --corpus corpus.txt --summary
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from doc_harvest import __version__
from doc_harvest.aggregator import aggregate_content, summarize
from doc_harvest.config import load_config
from doc_harvest.engine import start_crawl, start_direct
from doc_harvest.logger import init_logging
from doc_harvest.report.json_report import render_corpus, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _emit(payload: dict, json_output, corpus_output, corpus_text: str, pretty: bool) -> None:
    """Печатает payload в stdout или сохраняет в файлы."""
    if corpus_output:
        try:
            saved_corpus = render_corpus(corpus_text, corpus_output)
            click.echo(f'Corpus: {saved_corpus}')
        except OSError as e:
            print_error(f'Ошибка при сохранении корпуса: {e}')

    if json_output:
        try:
            saved_json = render_json(payload, json_output)
            click.echo(f'JSON report: {saved_json}')
        except (OSError, TypeError) as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        return

    if not corpus_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(payload, ensure_ascii=False, indent=indent))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='DocHarvest, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число страниц для обхода (override max_pages)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, limit, log_level, log_file, log_format):
    """Группа команд DocHarvest CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('start_url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-результат в файл'
)
@click.option(
    '--corpus', 'corpus_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить агрегированный текст корпуса в файл'
)
@click.option('--summary', is_flag=True, help='Добавить статистику по страницам')
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, start_url, json_output, corpus_output, summary, pretty, crawl_timeout):
    """Обойти документацию начиная с START_URL."""
    cfg = ctx.obj['config']
    try:
        if crawl_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_crawl(cfg, start_url), timeout=crawl_timeout)
            )
        else:
            result = asyncio.run(start_crawl(cfg, start_url))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    if not result.success:
        print_error(f'Crawl failed: {result.error}')

    payload = result.to_dict()
    if summary:
        payload['summary'] = summarize(result.pages).to_dict()
    _emit(payload, json_output, corpus_output, aggregate_content(result.pages), pretty)


@cli.command('fetch', context_settings=CONTEXT_SETTINGS)
@click.argument('urls', nargs=-1)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-результат в файл'
)
@click.option(
    '--corpus', 'corpus_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить собранный текст в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def fetch(ctx, urls, json_output, corpus_output, pretty):
    """Загрузить страницы URLS без перехода по ссылкам."""
    cfg = ctx.obj['config']
    try:
        result = asyncio.run(start_direct(cfg, list(urls)))
    except Exception as e:
        print_error(f'Ошибка при загрузке: {e}')

    if not result.success:
        print_error(f'Fetch failed: {result.error}')

    _emit(result.to_dict(), json_output, corpus_output, result.total_content, pretty)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
