"""
Failure reporting sink used by the JSON fetcher
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ErrorReporter(ABC):
    """
    Observability sink for fetch failures.

    Subclass this to forward failures to an external
    telemetry backend. Each failure is captured once, before it is raised.
    """

    @abstractmethod
    def capture_message(self, message: str, **context: Any) -> None:
        """Record one failure with optional context (url, status)."""
        ...


class LoggingErrorReporter(ErrorReporter):
    """Default reporter: writes captured failures to the application log."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def capture_message(self, message: str, **context: Any) -> None:
        if context:
            details = ", ".join(f"{k}={v}" for k, v in sorted(context.items()))
            self._log.error(f"{message} ({details})")
        else:
            self._log.error(message)
