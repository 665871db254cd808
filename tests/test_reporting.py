from __future__ import annotations

import csv
import io
import json
from pathlib import Path

import pytest

from saferules.reporting.csv_report import CSV_COLUMNS, render_csv
from saferules.reporting.json_report import render_json
from saferules.reporting.markdown_report import render_markdown
from saferules.reporting.summary import build_summary
from saferules.reporting.writer import render_as, write_report
from saferules.rules.model import CATEGORIES, Rule


def test_summary_counts(sample_rules):
    summary = build_summary(sample_rules)
    assert summary["total_rules"] == 4
    assert summary["by_severity"] == {"Mandatory": 2, "Recommended": 2}
    assert list(summary["by_category"]) == CATEGORIES
    assert summary["by_category"]["ControlFlow"] == 2
    assert summary["by_category"]["Pointers"] == 0


def test_json_report(sample_rules):
    data = json.loads(render_json(sample_rules))
    assert [r["id"] for r in data["rules"]] == ["CF1", "MEM1", "CF4", "STY1"]
    assert data["rules"][0] == {"id": "CF1", "category": "ControlFlow", "severity": "Mandatory", "text": "No goto"}
    assert data["summary"]["total_rules"] == 4


def test_csv_report(sample_rules):
    rows = list(csv.reader(io.StringIO(render_csv(sample_rules))))
    assert rows[0] == CSV_COLUMNS
    assert rows[1] == ["CF1", "ControlFlow", "Mandatory", "No goto"]
    assert len(rows) == 5


def test_csv_report_quotes_commas():
    rules = [Rule("CF1", "ControlFlow", "No goto, setjmp or longjmp", "Mandatory")]
    rows = list(csv.reader(io.StringIO(render_csv(rules))))
    assert rows[1][3] == "No goto, setjmp or longjmp"


def test_markdown_report(sample_rules):
    md = render_markdown(sample_rules + [Rule("X1", "Scope", "a | b", "Recommended")])
    assert md.startswith("# Safety-Critical C99 Coding Rules\n")
    assert "- Total Rules: **5**" in md
    assert "| ID | Category | Severity | Rule |" in md
    assert "| `CF1` | ControlFlow | Mandatory | No goto |" in md
    assert "a \\| b" in md
    assert "| Pointers |" not in md
    assert md.index("## Summary") < md.index("## Rules")


def test_render_as_rejects_unknown_format(sample_rules):
    with pytest.raises(ValueError, match="Unsupported output format: xml"):
        render_as("xml", sample_rules)


def test_write_report_refuses_overwrite(tmp_path: Path, sample_rules):
    out = tmp_path / "out" / "rules.txt"
    write_report(out, "text", sample_rules)
    assert out.read_text(encoding="utf-8").splitlines()[0] == "[Mandatory] ControlFlow: No goto"

    with pytest.raises(ValueError, match="already exists"):
        write_report(out, "json", sample_rules)

    write_report(out, "json", sample_rules, overwrite=True)
    assert json.loads(out.read_text(encoding="utf-8"))["summary"]["total_rules"] == 4


def test_markdown_escapes_pipes_in_ids():
    md = render_markdown([Rule("A|B", "Scope", "x", "Mandatory")])
    assert "| `A\\|B` | Scope | Mandatory | x |" in md
