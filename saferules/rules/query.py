from __future__ import annotations

from saferules.rules.errors import NotFoundError, RuleError
from saferules.rules.model import Rule, normalize_category, normalize_severity
from saferules.rules.store import RuleStore


def by_category(store: RuleStore, category: str) -> list[Rule]:
    if not isinstance(category, str):
        return []
    try:
        wanted = normalize_category(category)
    except RuleError:
        return []
    return [r for r in store.all() if r.category == wanted]


def by_severity(store: RuleStore, severity: str) -> list[Rule]:
    if not isinstance(severity, str):
        return []
    try:
        wanted = normalize_severity(severity)
    except RuleError:
        return []
    return [r for r in store.all() if r.severity == wanted]


def by_id(store: RuleStore, rule_id: str) -> Rule:
    rule = store.get(rule_id.strip())
    if rule is None:
        raise NotFoundError(rule_id)
    return rule


def select(store: RuleStore, category: str | None = None, severity: str | None = None) -> list[Rule]:
    rules = list(store.all())
    if category is not None:
        keep = {r.id for r in by_category(store, category)}
        rules = [r for r in rules if r.id in keep]
    if severity is not None:
        keep = {r.id for r in by_severity(store, severity)}
        rules = [r for r in rules if r.id in keep]
    return rules
