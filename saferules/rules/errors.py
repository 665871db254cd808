from __future__ import annotations


class RuleError(Exception):
    pass


class DuplicateIdError(RuleError):
    def __init__(self, rule_id: str):
        super().__init__(f"Duplicate rule id: {rule_id}")
        self.rule_id = rule_id


class NotFoundError(RuleError, KeyError):
    def __init__(self, rule_id: str):
        super().__init__(f"Rule not found: {rule_id}")
        self.rule_id = rule_id

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return self.args[0]


class StoreFrozenError(RuleError):
    pass


class UnknownCategoryError(RuleError, ValueError):
    pass


class UnknownSeverityError(RuleError, ValueError):
    pass


class RuleFileError(RuleError, ValueError):
    pass
