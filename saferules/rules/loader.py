from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from saferules.config import RulesConfig
from saferules.rules.catalog import builtin_rules
from saferules.rules.errors import RuleError, RuleFileError
from saferules.rules.model import Rule, make_rule
from saferules.rules.store import RuleStore

log = logging.getLogger(__name__)

REQUIRED_KEYS = ("id", "category", "severity", "text")


def load_rule_file(path: str | Path) -> list[Rule]:
    rules_path = Path(path)
    if not rules_path.is_file():
        raise RuleFileError(f"Rule file not found: {rules_path}")

    try:
        with rules_path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise RuleFileError(f"Invalid TOML in rule file {rules_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RuleFileError(f"Cannot read rule file {rules_path}: {e}") from e

    entries = raw.get("rule")
    if not isinstance(entries, list) or not entries:
        raise RuleFileError(f"Rule file must contain a non-empty [[rule]] array: {rules_path}")

    rules: list[Rule] = []
    for idx, item in enumerate(entries, start=1):
        if not isinstance(item, dict):
            raise RuleFileError(f"{rules_path}: rule #{idx} must be a table")
        missing = [k for k in REQUIRED_KEYS if k not in item]
        if missing:
            raise RuleFileError(f"{rules_path}: rule #{idx} missing key(s): {', '.join(missing)}")
        try:
            rules.append(make_rule(item["id"], item["category"], item["text"], item["severity"]))
        except (RuleError, ValueError) as e:
            raise RuleFileError(f"{rules_path}: rule #{idx}: {e}") from e
    return rules


def build_store(rules_cfg: RulesConfig) -> RuleStore:
    """Load the configured rule sources into a frozen store.

    The built-in catalog (when enabled) goes first, then every rule file in
    the configured order. A duplicate id in any source raises
    DuplicateIdError and no store is returned.
    """
    store = RuleStore()
    if rules_cfg.builtin:
        for rule in builtin_rules():
            store.add(rule)
        log.debug("Loaded %d built-in rules", len(store))
    for file_path in rules_cfg.files:
        loaded = load_rule_file(file_path)
        for rule in loaded:
            store.add(rule)
        log.debug("Loaded %d rules from %s", len(loaded), file_path)
    if len(store) == 0:
        log.warning("No rules loaded (built-in catalog disabled and no rule files given)")
    store.freeze()
    return store
