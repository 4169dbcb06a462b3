# ruleengine/rules/operators.py
from ruleengine.errors import InvalidArgumentError
from ruleengine.models import Order
from ruleengine.rules.base import OperatorRule
from ruleengine.utils.logging import logger

class AndRule(OperatorRule):
    """True iff every child is true (vacuously true with no children). Stops at the first false."""

    def _evaluate(self, order: Order) -> bool:
        for rule in self._rules:
            if not rule.evaluate(order):
                logger.debug("AndRule failed on %r for order %s", rule, order.id)
                return False
        return True


class OrRule(OperatorRule):
    """True iff any child is true (vacuously false with no children). Stops at the first true."""

    def _evaluate(self, order: Order) -> bool:
        for rule in self._rules:
            if rule.evaluate(order):
                logger.debug("OrRule satisfied by %r for order %s", rule, order.id)
                return True
        return False


class CriticalMassRule(OperatorRule):
    """
    True iff at least `minimum_rules_count` children are true.
    All children are evaluated, the full count is needed.
    """

    def __init__(self, minimum_rules_count: int) -> None:
        super().__init__()
        if isinstance(minimum_rules_count, bool) or not isinstance(minimum_rules_count, int):
            raise InvalidArgumentError(
                f"minimum_rules_count must be an int, got {type(minimum_rules_count).__name__}"
            )
        if minimum_rules_count < 0:
            raise InvalidArgumentError(f"minimum_rules_count must be >= 0, got {minimum_rules_count}")
        self._minimum_rules_count = minimum_rules_count

    @property
    def minimum_rules_count(self) -> int:
        return self._minimum_rules_count

    def _evaluate(self, order: Order) -> bool:
        hits = sum(1 for rule in self._rules if rule.evaluate(order))
        logger.debug(
            "CriticalMassRule: %d/%d rules true for order %s (minimum %d)",
            hits, len(self._rules), order.id, self._minimum_rules_count,
        )
        return hits >= self._minimum_rules_count

    def __repr__(self) -> str:
        return (
            f"CriticalMassRule(minimum_rules_count={self._minimum_rules_count}, "
            f"rules={self._children_repr()})"
        )
