"""Centralized logging setup and structured debug helpers.

All modules obtain loggers via logging.getLogger(__name__); the CLI calls
configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_CONTEXT_KEYS = ("event", "component", "action", "outcome", "target")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    An explicit level wins; otherwise DEPRESOLVE_LOG_LEVEL is honored
    (default INFO). Safe to call repeatedly; the stream handler is installed
    only once.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL, "INFO")).upper()
    level_value = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    if not any(getattr(h, "_depresolve", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        handler._depresolve = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by logger."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an `extra` mapping for structured debug records.

    Well-known keys (event, component, action, outcome, target) are always
    present so formatters can reference them; None values are dropped for
    everything else.
    """
    ctx: Dict[str, Any] = {k: fields.pop(k, None) for k in _CONTEXT_KEYS}
    ctx.update({k: v for k, v in fields.items() if v is not None})
    return ctx
