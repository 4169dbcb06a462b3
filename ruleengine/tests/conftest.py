import pytest

from ruleengine.models import Order, State, PaymentMethod
from ruleengine.rules.base import Rule
from ruleengine.rules.leaves import GreaterThanRule, OrderClosedRule

def make_order(id="123-456-111", value=50, state=State.Closed, **kw) -> Order:
    return Order(id=id, value=value, state=state, total=kw.pop("total", "100.0"),
                 payment_method=kw.pop("payment_method", PaymentMethod.CreditCard), **kw)

class ConstRule(Rule):
    """Leaf with a fixed answer; counts how often it was asked."""
    def __init__(self, result: bool):
        self.result = result
        self.calls = 0

    def _evaluate(self, order):
        self.calls += 1
        return self.result

class ExplodingRule(Rule):
    def _evaluate(self, order):
        raise AssertionError("must not be evaluated")

@pytest.fixture
def order():
    return make_order()

@pytest.fixture
def rules():
    return [GreaterThanRule(value=30), OrderClosedRule()]
