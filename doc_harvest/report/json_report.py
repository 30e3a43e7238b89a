# doc_harvest/report/json_report.py

"""
Сохранение результатов DocHarvest в файлы.

JSON-сериализация результата обхода и запись агрегированного корпуса.
"""
import json
from pathlib import Path
from typing import Any, Dict


def render_json(data: Dict[str, Any], output_path: Path | str) -> Path:
    """
    Сохраняет словарь data в формате JSON по указанному пути.

    :param data: сериализованный результат (``CrawlResult.to_dict()`` и т.п.)
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from doc_harvest.report.json_report import render_json
    report_path = render_json(result.to_dict(), 'reports/crawl.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output


def render_corpus(text: str, output_path: Path | str) -> Path:
    """Сохраняет агрегированный текст корпуса (UTF-8) и возвращает путь."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding='utf-8')
    return output
