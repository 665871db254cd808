from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from saferules.rules.model import CATEGORIES, SEVERITIES, Rule


def build_summary(rules: Iterable[Rule]) -> dict:
    rules = list(rules)
    by_severity = Counter(r.severity for r in rules)
    by_category = Counter(r.category for r in rules)
    return {
        "total_rules": len(rules),
        "by_severity": {s: by_severity.get(s, 0) for s in SEVERITIES},
        "by_category": {c: by_category.get(c, 0) for c in CATEGORIES},
    }
