"""HTTP middleware: per-request execution context.

Applied in main app. Import and use from asset_host.main.
"""

from asset_host.middleware.execution_context import ExecutionContextMiddleware

__all__ = ["ExecutionContextMiddleware"]
