# src/logging/context.py — v1
"""Contextual logging support — attach file_id, request_id, component to log records."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

# Context variables for structured logging, set once per context build.
_file_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_id", default=None
)
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_component: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "component", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    file_id: str | None = None
    request_id: str | None = None
    component: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        file_id=_file_id.get(),
        request_id=_request_id.get(),
        component=_component.get(),
    )


def set_request_context(file_id: str, request_id: str) -> None:
    """Set request-level context (called once per context build)."""
    _file_id.set(file_id)
    _request_id.set(request_id)


def set_component_context(component: str | None) -> None:
    """Set the engine component currently running."""
    _component.set(component)


def clear_context() -> None:
    """Reset all context variables."""
    _file_id.set(None)
    _request_id.set(None)
    _component.set(None)


@contextmanager
def request_context(file_id: str, request_id: str) -> Iterator[None]:
    """Scope request-level context to a block, restoring prior values on exit."""
    file_token = _file_id.set(file_id)
    request_token = _request_id.set(request_id)
    try:
        yield
    finally:
        _request_id.reset(request_token)
        _file_id.reset(file_token)


@contextmanager
def component_context(component: str) -> Iterator[None]:
    """Scope the running component to a block, restoring the prior value on exit."""
    token = _component.set(component)
    try:
        yield
    finally:
        _component.reset(token)
