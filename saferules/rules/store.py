from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from saferules.rules.errors import DuplicateIdError, StoreFrozenError
from saferules.rules.model import Rule

log = logging.getLogger(__name__)


class RuleStore:
    """Ordered, append-only collection of rules keyed by unique id.

    Rules are added during start-up and the store is then frozen; from that
    point on it is read-only for the rest of the process.
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: list[Rule] = []
        self._by_id: dict[str, Rule] = {}
        self._frozen = False
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> None:
        if self._frozen:
            raise StoreFrozenError(f"Cannot add rule {rule.id}: store is frozen")
        if rule.id in self._by_id:
            raise DuplicateIdError(rule.id)
        self._rules.append(rule)
        self._by_id[rule.id] = rule

    def freeze(self) -> None:
        self._frozen = True
        log.debug("Rule store frozen with %d rules", len(self._rules))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def all(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def get(self, rule_id: str) -> Rule | None:
        return self._by_id.get(rule_id)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules))

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id
