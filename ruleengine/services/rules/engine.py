# ruleengine/services/rules/engine.py
from ruleengine.errors import InvalidArgumentError, RuleEngineError
from ruleengine.models import Order
from ruleengine.rules.base import Rule
from ruleengine.schemas import EvaluationResult
from ruleengine.utils.logging import logger

def evaluate_order(rule: Rule, order: Order) -> EvaluationResult:
    if not isinstance(rule, Rule):
        raise InvalidArgumentError(f"expected a Rule, got {type(rule).__name__}")
    try:
        passed = rule.evaluate(order)
    except RuleEngineError as exc:
        logger.error("Rule %r could not be evaluated: %s", rule, exc)
        raise
    verdict = "pass" if passed else "fail"
    logger.info("Order %s evaluated by %r: %s", order.id, rule, verdict)
    return EvaluationResult(order_id=order.id, rule=repr(rule), passed=passed, verdict=verdict)
