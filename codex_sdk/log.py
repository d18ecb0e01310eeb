"""
Logging setup for applications using the SDK

The library itself never installs handlers; applications and scripts call
configure_logging once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level=logging.INFO, name: str = "codex_sdk") -> logging.Logger:
    """Send log records of `name` (codex_sdk by default) to stderr"""
    logger = logging.getLogger(name)
    if not any(getattr(h, "_codex_sdk", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._codex_sdk = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
