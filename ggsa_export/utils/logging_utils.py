"""Structured logging helpers: contextual fields and call tracing."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """
    Return a copy of the fields currently attached to log records.

    Returns:
        Mapping of field name to value, empty outside any LogContext
    """
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager attaching structured fields to every log record.

    Fields nest: an inner context adds to (and may override) the fields of
    the enclosing one, and the enclosing fields come back on exit.

    Example:
        with LogContext(export_id="ggsa", entries=12):
            logger.info("Rendering export")
            # JSON logs include export_id and entries
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._saved: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        self._saved = get_log_context()
        _thread_local.context = {**self._saved, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self._saved or {}


class _ContextFilter(logging.Filter):
    """Copies the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, level: str = "DEBUG"
) -> Callable:
    """
    Decorator logging entry, exit and exceptions of a function.

    Exceptions are logged and re-raised unchanged.

    Example:
        @log_function_call
        def render(entries, query):
            ...

        @log_function_call(level="INFO")
        def read_payload(path):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            logger.log(log_level, f"Entering {f.__qualname__}")
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__qualname__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise
            logger.log(log_level, f"Exiting {f.__qualname__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
