"""Exceptions raised by the rule use cases."""


class RuleNotFoundError(ValueError):
    """The requested rule does not exist or has been deleted."""

    def __init__(self, rule_id: int | None) -> None:
        super().__init__(f"Rule {rule_id} not found")
        self.rule_id = rule_id


class InvalidRuleError(ValueError):
    """Rule content that cannot be evaluated against entries."""


class RuleChainError(RuntimeError):
    """The active rules do not form a single well-formed chain."""


__all__ = ["InvalidRuleError", "RuleChainError", "RuleNotFoundError"]
