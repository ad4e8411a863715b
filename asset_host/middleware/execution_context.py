"""Execution context middleware.

Builds the per-request ExecutionContext (request host, scheme, tenant id)
from headers so that the domain resolver and rewriter built for this
request see the right tenant. The context is reset after the response so
nothing leaks into the next request.
Uses raw ASGI (no BaseHTTPMiddleware) so the context variable is set in
the same task as the route.
"""

import logging
from typing import Callable

from asset_host.core.execution_context import (
    ExecutionContext,
    clear_execution_context,
    set_execution_context,
)

logger = logging.getLogger(__name__)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("latin-1")
    return None


def _host_without_port(raw: str | None) -> str | None:
    if not raw:
        return None
    host = raw.split(",")[0].strip()
    if host.startswith("["):
        return host.split("]")[0].lstrip("[").lower() or None
    host = host.rsplit(":", 1)[0] if ":" in host else host
    return host.lower() or None


def _parse_tenant_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug("Ignoring non-integer tenant id header: %r", raw)
        return None


def build_execution_context(scope: dict, tenant_header_name: str) -> ExecutionContext:
    """Return the ExecutionContext for an ASGI http scope."""
    host = _get_header(scope, "x-forwarded-host") or _get_header(scope, "host")
    proto = _get_header(scope, "x-forwarded-proto")
    scheme = (proto.split(",")[0].strip() if proto else scope.get("scheme", "http")).lower()
    return ExecutionContext(
        request_host=_host_without_port(host),
        is_secure=scheme == "https",
        tenant_id=_parse_tenant_id(_get_header(scope, tenant_header_name)),
    )


def ExecutionContextMiddleware(app: Callable, tenant_header_name: str = "X-Tenant-ID") -> Callable:
    """Set the execution context for each HTTP request and reset it afterwards. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        set_execution_context(build_execution_context(scope, tenant_header_name))
        try:
            await app(scope, receive, send)
        finally:
            clear_execution_context()

    return asgi_app
