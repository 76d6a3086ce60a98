"""
Structured Logging for Slidewipe
================================

Bounded Context: Observability

JSON-structured logging keyed by typed events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    set_log_level: Level shared by all component loggers

Example:
    >>> from slidewipe_view.logging import create_logger, LogEvent
    >>> logger = create_logger("controller")
    >>> logger.info(
    ...     event=LogEvent.PROGRESS_UPDATED,
    ...     message="Progress changed",
    ...     metadata={'progress': 0.75}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger, set_log_level

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'set_log_level',
]
