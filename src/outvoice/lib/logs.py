"""
Logging utilities for OutVoice.

Every module logs through a child of the ``outvoice`` package logger, named
after its dotted module path (``outvoice.services.invoice_store``). Only
the package logger carries a handler, so LOG_LEVEL and the format are set
in one place and records still propagate to the root logger.
"""

import logging
import os
from pathlib import Path

PACKAGE = "outvoice"

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module of the package.

    Args:
        name: __file__ of the calling module, or a logger name. Names
              outside the package are nested under it.

    Returns:
        logging.Logger that propagates to the configured package logger.
    """
    if "/" in name or "\\" in name:
        name = module_name(name)
    elif name != PACKAGE and not name.startswith(f"{PACKAGE}."):
        name = f"{PACKAGE}.{name}"
    _package_logger()
    return logging.getLogger(name)


def module_name(path: str | Path) -> str:
    """Map a source file path to its dotted logger name."""
    source = Path(path).resolve()
    try:
        parts = source.relative_to(_PACKAGE_DIR).with_suffix("").parts
    except ValueError:
        return f"{PACKAGE}.{source.stem}"
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join((PACKAGE, *parts))


def _package_logger() -> logging.Logger:
    log = logging.getLogger(PACKAGE)
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)
    return log
