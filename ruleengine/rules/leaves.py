# ruleengine/rules/leaves.py
from ruleengine.models import Order, State
from ruleengine.rules.base import Rule

CARD_NUMBER_LENGTH = 16

class GreaterThanRule(Rule):
    """True when the order value is strictly greater than `value`."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def _evaluate(self, order: Order) -> bool:
        return order.value > self.value

    def __repr__(self) -> str:
        return f"GreaterThanRule(value={self.value})"


class OrderClosedRule(Rule):
    def _evaluate(self, order: Order) -> bool:
        return order.state == State.Closed


class CardNumberValidRule(Rule):
    """
    Shape check only: exactly 16 ASCII digits.
    No checksum (Luhn) validation.
    """

    def _evaluate(self, order: Order) -> bool:
        card = order.card_number
        if card is None or not card.strip():
            return False
        return card.isascii() and card.isdigit() and len(card) == CARD_NUMBER_LENGTH
