"""
Logging setup for the GoMarketplace cart.

Modules take their logger from here so the stdout handler is installed once:

    from gomarket.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# The Upstash client talks over httpx
NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11", "httpcore.connection")

_CONTROL_CHARS = {"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""}


def _level_from_env() -> int:
    """LOG_LEVEL as a logging constant; unknown names mean INFO."""
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _install_stdout_handler() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = _level_from_env()
    compact = os.environ.get("APP_ENV", "development") == "production"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if compact else LOG_FORMAT))

    root.setLevel(level)
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_install_stdout_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    """Named logger sharing the root stdout handler."""
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None, max_length: int = 16) -> str:
    """
    Make a client-supplied product id safe to log.

    Control characters are escaped so an id cannot forge log lines
    (CWE-117), then the result is cut to ``max_length``.

    Returns:
        Sanitized id, or "N/A" when empty
    """
    if not id_value:
        return "N/A"
    safe_value = "".join(_CONTROL_CHARS.get(char, char) for char in str(id_value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
]
