# ruleengine/rules/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from ruleengine.errors import InvalidArgumentError, InvalidStateError
from ruleengine.models import Order

class Rule(ABC):
    """
    A boolean predicate over an Order.
    Subclasses implement `_evaluate`; callers always go through `evaluate`,
    which rejects a missing order before any rule logic runs.
    """

    def evaluate(self, order: Order) -> bool:
        if not isinstance(order, Order):
            raise InvalidArgumentError(
                f"{type(self).__name__}.evaluate expects an Order, got {type(order).__name__}"
            )
        return self._evaluate(order)

    @abstractmethod
    def _evaluate(self, order: Order) -> bool:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OperatorRule(Rule):
    """
    Rule combining the results of child rules.
    Children are set (and replaced) through `add_rules`; the same child may be
    shared by several operators since evaluation never mutates it.
    """

    def __init__(self) -> None:
        self._rules: Optional[Tuple[Rule, ...]] = None

    def add_rules(self, rules: Iterable[Rule]) -> None:
        try:
            children = tuple(rules)
        except TypeError:
            raise InvalidArgumentError(
                f"add_rules expects an iterable of rules, got {type(rules).__name__}"
            ) from None
        for child in children:
            if not isinstance(child, Rule):
                raise InvalidArgumentError(f"not a Rule: {child!r}")
        self._rules = children

    @property
    def rules(self) -> Optional[Tuple[Rule, ...]]:
        return self._rules

    def evaluate(self, order: Order) -> bool:
        if self._rules is None:
            raise InvalidStateError(f"{type(self).__name__} has no rules; call add_rules() first")
        return super().evaluate(order)

    def _children_repr(self) -> str:
        if self._rules is None:
            return "<unset>"
        return "[" + ", ".join(repr(r) for r in self._rules) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._children_repr()})"
