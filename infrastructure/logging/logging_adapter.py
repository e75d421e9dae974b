"""
Logging adapter that implements LoggingPort protocol.

Use cases bind account_id/step context through this adapter and never
import structlog themselves.
"""
from typing import Any
from domain.interfaces import BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """BoundLogger backed by a structlog bound logger."""

    def __init__(self, bound_logger):
        self._logger = bound_logger

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter:
    """
    Adapter that implements LoggingPort for structured JSON logging.

    Args:
        **context: Fields bound to every logger this adapter hands out
                   (e.g. request_id for one HTTP request)
    """

    def __init__(self, **context: Any):
        self._context = context

    def bind(self, **kwargs: Any) -> BoundLogger:
        """
        Create a bound logger with the adapter context plus kwargs.

        Returns:
            A bound logger with the specified context
        """
        return StructlogBoundLogger(structlog_logger.bind(**self._context, **kwargs))
