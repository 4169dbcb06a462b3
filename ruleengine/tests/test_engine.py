# tests/test_engine.py
import logging

import pytest

from ruleengine.errors import InvalidArgumentError, InvalidStateError
from ruleengine.models import State
from ruleengine.rules.operators import AndRule
from ruleengine.services.rules.engine import evaluate_order
from conftest import make_order

def test_evaluate_order_pass_and_fail(rules):
    and_rule = AndRule()
    and_rule.add_rules(rules)

    res = evaluate_order(and_rule, make_order(id="123-456-111", value=50, state=State.Closed))
    assert res.passed is True and res.verdict == "pass"
    assert res.order_id == "123-456-111"
    assert res.rule == repr(and_rule)

    res = evaluate_order(and_rule, make_order(id="123-456-222", value=50, state=State.Open))
    assert res.passed is False and res.verdict == "fail"

def test_evaluate_order_logs(order, rules, caplog):
    caplog.set_level(logging.INFO, logger="ruleengine")
    evaluate_order(rules[0], order)
    assert any("123-456-111" in r.getMessage() and "pass" in r.getMessage() for r in caplog.records)

def test_evaluate_order_rejects_non_rule(order):
    with pytest.raises(InvalidArgumentError):
        evaluate_order(lambda o: True, order)

def test_evaluate_order_propagates_errors(order, caplog):
    caplog.set_level(logging.ERROR, logger="ruleengine")
    with pytest.raises(InvalidStateError):
        evaluate_order(AndRule(), order)
    assert any(r.levelno == logging.ERROR for r in caplog.records)
