from __future__ import annotations

import json
from collections.abc import Iterable

from saferules.reporting.summary import build_summary
from saferules.rules.model import Rule


def _rule_to_json_item(rule: Rule) -> dict:
    return {
        "id": rule.id,
        "category": rule.category,
        "severity": rule.severity,
        "text": rule.text,
    }


def render_json(rules: Iterable[Rule]) -> str:
    rules = list(rules)
    payload = {
        "rules": [_rule_to_json_item(r) for r in rules],
        "summary": build_summary(rules),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
