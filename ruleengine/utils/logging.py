import logging

from ruleengine.config import settings

logger = logging.getLogger("ruleengine")

def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(getattr(h, "_ruleengine", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        handler._ruleengine = True  # marks our handler so repeated calls don't stack
        logger.addHandler(handler)
    return logger
