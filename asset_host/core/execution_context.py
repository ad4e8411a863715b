"""Execution context for one inbound request.

Middleware sets the current request host, scheme and tenant id in this
context variable so that the domain resolver and the rewriter can build
per-request state (memoized domain sets) without module-level globals.
"""

from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionContext:
    """Immutable snapshot of the request the engine is running for."""

    request_host: str | None = None
    is_secure: bool = True
    tenant_id: int | None = None


_current_context: ContextVar[ExecutionContext] = ContextVar(
    "current_execution_context", default=ExecutionContext()
)


def set_execution_context(context: ExecutionContext) -> None:
    """Set the execution context for this request."""
    _current_context.set(context)


def clear_execution_context() -> None:
    """Reset the execution context to its defaults."""
    _current_context.set(ExecutionContext())


def get_execution_context() -> ExecutionContext:
    """Return the current execution context (defaults if none was set)."""
    return _current_context.get()
