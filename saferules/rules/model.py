from __future__ import annotations

import re
from dataclasses import dataclass

from saferules.rules.errors import UnknownCategoryError, UnknownSeverityError

CATEGORIES = [
    "ControlFlow",
    "Memory",
    "Functions",
    "Assertions",
    "Scope",
    "ErrorHandling",
    "Preprocessor",
    "Pointers",
    "Verification",
    "Style",
]

SEVERITIES = ["Mandatory", "Recommended"]

_SEVERITY_ALIASES = {
    "mandatory": "Mandatory",
    "shall": "Mandatory",
    "must": "Mandatory",
    "required": "Mandatory",
    "recommended": "Recommended",
    "should": "Recommended",
    "advisory": "Recommended",
}

_CATEGORY_KEYS = {c.lower(): c for c in CATEGORIES}


def _key(value: str) -> str:
    return re.sub(r"[\s_\-]+", "", value.strip().lower())


def normalize_category(value: str) -> str:
    category = _CATEGORY_KEYS.get(_key(value or ""))
    if category is None:
        raise UnknownCategoryError(f"Unknown category: {value!r} (expected one of {', '.join(CATEGORIES)})")
    return category


def normalize_severity(value: str) -> str:
    severity = _SEVERITY_ALIASES.get(_key(value or ""))
    if severity is None:
        raise UnknownSeverityError(f"Unknown severity: {value!r} (expected one of {', '.join(SEVERITIES)})")
    return severity


@dataclass(frozen=True)
class Rule:
    id: str
    category: str
    text: str
    severity: str

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Rule id must be non-empty")
        if self.id != self.id.strip():
            raise ValueError(f"Rule id has surrounding whitespace: {self.id!r}")
        if not self.text or not self.text.strip():
            raise ValueError(f"Rule {self.id} has empty text")
        if self.category not in CATEGORIES:
            raise ValueError(f"Rule {self.id} has invalid category: {self.category!r}")
        if self.severity not in SEVERITIES:
            raise ValueError(f"Rule {self.id} has invalid severity: {self.severity!r}")


def make_rule(rule_id: str, category: str, text: str, severity: str) -> Rule:
    """Build a rule from loosely spelled input, e.g. a rule file entry."""
    return Rule(
        id=str(rule_id).strip(),
        category=normalize_category(str(category)),
        text=str(text).strip(),
        severity=normalize_severity(str(severity)),
    )
