"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

One JSON object per log line, emitted under the "slidewipe" logger tree.

Every component logs to "slidewipe.<component>". Component loggers carry no
level of their own unless one is passed explicitly; they inherit the level
of the "slidewipe" parent, so set_log_level() tunes the whole application
at once (the CLI's --log-level does exactly that).

Example:
    >>> logger = create_logger("pipeline")
    >>> logger.info(
    ...     event=LogEvent.VIDEO_WRITTEN,
    ...     message="Sweep written",
    ...     metadata={'frames': 60, 'path': 'runs/sweep/sweep.mp4'}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "INFO",
     "component": "pipeline", "event": "video.written",
     "message": "Sweep written", "metadata": {"frames": 60, ...}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent

ROOT_LOGGER_NAME = "slidewipe"
DEFAULT_LEVEL = logging.INFO


def _root_logger() -> logging.Logger:
    """Parent of all component loggers; owns the single JSON handler."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.level == logging.NOTSET:
        root.setLevel(DEFAULT_LEVEL)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
    return root


def set_log_level(level: int) -> None:
    """Set the level inherited by every slidewipe component logger."""
    _root_logger().setLevel(level)


class StructuredLogger:
    """
    JSON structured logger for one component.

    Attributes:
        component: Component name (e.g., "controller", "compositor")
        logger: Underlying Python logger ("slidewipe.<component>")
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Args:
            component: Component identifier
            level: Pin this component to a level (default: inherit from "slidewipe")
            logger_name: Custom logger name (default: slidewipe.<component>)
        """
        _root_logger()
        self.component = component
        self.logger_name = logger_name or f"{ROOT_LOGGER_NAME}.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        # Per-frame debug events are skipped before any JSON is built
        if not self.logger.isEnabledFor(level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            log_entry['metadata'] = metadata
        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Per-frame and per-drag chatter."""
        self._log(logging.DEBUG, event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Inputs loaded, outputs written."""
        self._log(logging.INFO, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log a failure. The exception type and message land in the
        "exception" field of the JSON entry.

        Example:
            >>> try:
            ...     WipeConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CONFIG_ERROR,
            ...         message="Invalid config",
            ...         exc_info=e,
            ...         metadata={'path': str(path)}
            ...     )
        """
        self._log(logging.ERROR, event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """The message is already a JSON document; it is passed through as-is."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create a component logger.

    Example:
        >>> logger = create_logger("compositor")
    """
    return StructuredLogger(component=component, level=level)
