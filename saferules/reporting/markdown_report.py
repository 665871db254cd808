from __future__ import annotations

from collections.abc import Iterable

from saferules.reporting.summary import build_summary
from saferules.rules.model import Rule


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def _summary_lines(summary: dict) -> list[str]:
    lines = [
        "## Summary",
        "",
        f"- Total Rules: **{summary['total_rules']}**",
    ]
    for severity, count in summary["by_severity"].items():
        lines.append(f"- {severity}: {count}")
    lines.append("")
    lines.append("| Category | Rules |")
    lines.append("|---|---:|")
    for category, count in summary["by_category"].items():
        if count:
            lines.append(f"| {category} | {count} |")
    return lines


def render_markdown(rules: Iterable[Rule]) -> str:
    rules = list(rules)
    lines = [
        "# Safety-Critical C99 Coding Rules",
        "",
        "[Summary](#summary) | [Rules](#rules)",
        "",
        *_summary_lines(build_summary(rules)),
        "",
        "## Rules",
        "",
        "| ID | Category | Severity | Rule |",
        "|---|---|---|---|",
    ]
    for r in rules:
        lines.append(f"| `{_cell(r.id)}` | {r.category} | {r.severity} | {_cell(r.text)} |")
    return "\n".join(lines).rstrip() + "\n"
