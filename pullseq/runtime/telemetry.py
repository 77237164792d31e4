"""Structured logging for cursor lifecycle events.

This module provides telemetry hooks for cursors, emitting structured logs
for terminations and for early-stop/abort handling at relay boundaries.
Everything is logged at DEBUG; the library installs no handlers.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _name(cursor: Any) -> str:
    return type(cursor).__name__


def log_cursor_terminated(*, cursor: Any, operation: str) -> None:
    """Log that a cursor's termination cache was written.

    Args:
        cursor: Cursor that terminated
        operation: Operation that produced the terminal result
    """
    logger.debug(
        "cursor_terminated",
        extra={"cursor": _name(cursor), "operation": operation},
    )


def log_forced_termination(*, cursor: Any, operation: str) -> None:
    """Log that a wrapper terminated although its source kept yielding.

    Args:
        cursor: Wrapper cursor that forced termination
        operation: ``return`` or ``throw``
    """
    logger.debug(
        "cursor_forced_termination",
        extra={"cursor": _name(cursor), "operation": operation},
    )


def log_abort_absorbed(*, cursor: Any) -> None:
    """Log that a source recovered from ``throw`` and iteration continues.

    Args:
        cursor: Cursor whose source absorbed the abort
    """
    logger.debug("cursor_abort_absorbed", extra={"cursor": _name(cursor)})
