import logging
import os
import sys

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level: int | None = None) -> None:
    """Configure linky diagnostics on stderr.

    Args:
        level: Logging level. If None, taken from LINKY_LOG (default WARNING).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        env_level = os.environ.get("LINKY_LOG", "").strip().upper()
        level = _LEVELS.get(env_level, logging.WARNING)

    root_logger = logging.getLogger("linky")
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root_logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(f"linky.{name}")
