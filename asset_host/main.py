"""FastAPI application entry point.

Wiring only: logging, lifespan, middleware, routers. No business logic
here (SRP). See asset_host.core.lifespan.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from asset_host.api.v1 import api_router
from asset_host.application.policies import RewritePolicies
from asset_host.core.config import get_settings
from asset_host.core.lifespan import create_lifespan
from asset_host.middleware import ExecutionContextMiddleware
from asset_host.shared.logging import setup_logging


def create_app(policies: RewritePolicies | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        policies: Deployment policies (static host override, locality
            override, rewrite veto). Defaults to none.
    """
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.policies = policies or RewritePolicies()

    app.add_middleware(
        ExecutionContextMiddleware,
        tenant_header_name=settings.tenant_header_name,
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
