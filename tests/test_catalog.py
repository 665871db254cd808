from __future__ import annotations

from saferules.reporting.text_report import render
from saferules.rules.catalog import BUILTIN_RULES, builtin_rules
from saferules.rules.model import CATEGORIES, SEVERITIES
from saferules.rules.store import RuleStore


def test_builtin_ids_unique_and_loadable():
    ids = [r.id for r in BUILTIN_RULES]
    assert len(ids) == len(set(ids))
    assert len(RuleStore(builtin_rules())) == len(BUILTIN_RULES)


def test_builtin_covers_every_category_and_severity():
    assert {r.category for r in BUILTIN_RULES} == set(CATEGORIES)
    assert {r.severity for r in BUILTIN_RULES} == set(SEVERITIES)


def test_builtin_core_restrictions_present():
    store = RuleStore(builtin_rules())
    assert store.get("CF1").text.startswith("Do not use goto")
    assert store.get("MEM1").category == "Memory"
    assert store.get("AS1").severity == "Mandatory"


def test_builtin_rules_returns_fresh_list():
    first = builtin_rules()
    first.clear()
    assert builtin_rules()
    assert render(builtin_rules()).count("\n") == len(BUILTIN_RULES) - 1
