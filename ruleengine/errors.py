class RuleEngineError(Exception):
    """Base class for every error raised by the rule engine."""


class InvalidArgumentError(RuleEngineError, ValueError):
    """An argument is absent or of the wrong kind (e.g. no order given)."""


class InvalidStateError(RuleEngineError, RuntimeError):
    """A rule is used before it has been fully configured."""
