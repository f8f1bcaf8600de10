"""Logging utilities for flatgeom.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All flatgeom code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_flatgeom_root() -> logging.Logger:
    """Ensure the 'flatgeom' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'flatgeom' logger.
    """
    root = logging.getLogger('flatgeom')
    # Replace the NullHandler added by the package __init__ with a StreamHandler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        for h in list(root.handlers):
            if isinstance(h, logging.NullHandler):
                root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'flatgeom' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_flatgeom_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font cache scans) when demos plot
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'flatgeom' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is set to NOTSET so it inherits from the 'flatgeom' parent configured via
    configure_logging().

    Getting a logger does not attach handlers: kernel modules obtain their
    loggers at import time, and importing the library must stay silent until
    the application calls configure_logging().
    """
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
