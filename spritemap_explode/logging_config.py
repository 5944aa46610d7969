import logging
import os

_DEFAULT_LEVEL = os.getenv("SPRITEMAP_LOG_LEVEL", "WARNING").upper()
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level=None):
    """Route the package logger to the current stderr, replacing any earlier handler."""
    desired_level = getattr(logging, (level or _DEFAULT_LEVEL).upper(), logging.WARNING)
    logger = logging.getLogger("spritemap_explode")
    logger.setLevel(desired_level)

    previous = getattr(configure_logging, "_handler", None)
    if previous is not None:
        logger.removeHandler(previous)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)

    configure_logging._handler = handler
    return logger
