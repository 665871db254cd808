from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from saferules.reporting.csv_report import render_csv
from saferules.reporting.json_report import render_json
from saferules.reporting.markdown_report import render_markdown
from saferules.reporting.text_report import render
from saferules.rules.model import Rule

log = logging.getLogger(__name__)

RENDERERS: dict[str, Callable[[Iterable[Rule]], str]] = {
    "text": render,
    "json": render_json,
    "csv": render_csv,
    "md": render_markdown,
}


def render_as(fmt: str, rules: Iterable[Rule]) -> str:
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported output format: {fmt}") from None
    return renderer(rules)


def write_report(path: Path, fmt: str, rules: Iterable[Rule], overwrite: bool = False) -> Path:
    if path.exists() and not overwrite:
        raise ValueError(f"Output file already exists: {path} (use --overwrite)")
    text = render_as(fmt, rules)
    if not text.endswith("\n"):
        text += "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.info("Wrote %s report: %s", fmt, path)
    return path
