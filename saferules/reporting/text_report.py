from __future__ import annotations

from collections.abc import Iterable

from saferules.rules.model import Rule


def render_rule(rule: Rule) -> str:
    return f"[{rule.severity}] {rule.category}: {rule.text}"


def render(rules: Iterable[Rule]) -> str:
    return "\n".join(render_rule(r) for r in rules)
