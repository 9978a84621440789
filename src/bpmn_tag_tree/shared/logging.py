"""Structured logging helpers for tag tree operations.

Every record carries the emitting component and an optional correlation id so
that mutations and renders belonging to one document can be traced together.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Logger that attaches component and correlation id to every record."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional id shared by related operations
            component: Component name, defaults to the last part of ``name``
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            combined_extra.update(extra)
        return combined_extra

    def is_debug_enabled(self) -> bool:
        """Check whether debug records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    def with_correlation(self, correlation_id: Optional[str]) -> "CorrelationLogger":
        """Return a logger for the same component bound to another correlation id."""
        return CorrelationLogger(self.logger.name, correlation_id, self.component)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message with correlation info."""
        self.logger.debug(message, extra=self._get_extra(extra))

    def error(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = True
    ) -> None:
        """Log error message with correlation info."""
        self.logger.error(message, extra=self._get_extra(extra), exc_info=exc_info)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance."""
    return CorrelationLogger(name, correlation_id, component)
