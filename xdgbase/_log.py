"""Centralized logging for xdgbase.

Library modules log through ``logging.getLogger(__name__)``. The ``xdgbase``
logger only carries a ``NullHandler`` and propagates, so records reach the
host application's logging config. ``setup_logging`` is an opt-in for
callers that want a stderr handler of their own.
"""
from __future__ import annotations

import logging
import sys
import threading

_lock = threading.Lock()
_handler: logging.Handler | None = None

logging.getLogger("xdgbase").addHandler(logging.NullHandler())


class _Formatter(logging.Formatter):
    """Format log records as ``[tag] message``, stripping the ``xdgbase.`` prefix."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("xdgbase."):
            name = name[len("xdgbase.") :]
        return f"[{name}] {super().format(record)}"


def setup_logging(verbose: bool = False) -> logging.Handler:
    """Attach a ``StreamHandler(sys.stderr)`` to the ``xdgbase`` logger.

    The handler is added once; later calls only change the level, WARNING
    or DEBUG when *verbose* is True. Returns the handler.
    """
    global _handler
    with _lock:
        logger = logging.getLogger("xdgbase")
        if _handler is None:
            _handler = logging.StreamHandler(sys.stderr)
            _handler.setFormatter(_Formatter())
            logger.addHandler(_handler)
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        return _handler


def teardown_logging() -> None:
    """Remove the handler added by :func:`setup_logging` and reset the level."""
    global _handler
    with _lock:
        logger = logging.getLogger("xdgbase")
        if _handler is not None:
            logger.removeHandler(_handler)
            _handler = None
        logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module *name*, e.g. ``get_logger(__name__)``.

    Importing this module is what installs the ``NullHandler``; nothing is
    configured here.
    """
    return logging.getLogger(name)
