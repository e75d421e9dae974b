from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying bound context (account_id, step, request_id, ...)."""

    def info(self, event: str, **kwargs: Any) -> None: ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error.

        Args:
            event: Event name, snake_case (e.g. "sweep_failed")
            exc_info: Attach the active exception's traceback
            **kwargs: Additional context fields
        """
        ...


class LoggingPort(Protocol):
    """Source of bound loggers for the use cases."""

    def bind(self, **kwargs: Any) -> BoundLogger: ...


class NoOpLogger:
    """BoundLogger that discards everything, used when no logging port is injected."""

    def info(self, event: str, **kwargs: Any) -> None:
        pass

    def warning(self, event: str, **kwargs: Any) -> None:
        pass

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        pass
