"""Context-aware logging utilities for MergeSplit."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking current processing context
current_file = contextvars.ContextVar[str | None]("current_file", default=None)
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_column = contextvars.ContextVar[str | None]("current_column", default=None)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        context = {
            "file": current_file.get(),
            "sheet": current_sheet.get(),
            "column": current_column.get(),
        }
        context = {key: value for key, value in context.items() if value}

        extra = dict(kwargs.get("extra") or {})
        extra.update(context)
        kwargs["extra"] = extra

        if context:
            context_str = ", ".join(f"{key}={value}" for key, value in context.items())
            msg = f"[{context_str}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _ContextScope:
    """Sets a context variable for the duration of a with-block."""

    variable: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.variable.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.variable.reset(self.token)
            self.token = None


class FileContext(_ContextScope):
    """Context manager for tracking current file being processed."""

    variable = current_file


class SheetContext(_ContextScope):
    """Context manager for tracking current sheet being processed."""

    variable = current_sheet


class ColumnContext(_ContextScope):
    """Context manager for tracking the column being resolved."""

    variable = current_column

