# File: doc_harvest/report/__init__.py
"""doc_harvest.report: Запись результатов (JSON и текст корпуса) используемая CLI."""

from doc_harvest.report.json_report import render_corpus, render_json

__all__ = ["render_json", "render_corpus"]
