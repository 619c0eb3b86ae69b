"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from sso.adapter.session import InMemorySessionStore
from sso.config import Settings
from sso.domain.service import AuthService
from sso.interface.api.error_handlers import register_error_handlers
from sso.interface.api.routes import auth, health
from sso.interface.api.session import ServerSessionMiddleware
from sso.util.di.container import create_container
from sso.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container is built when omitted
    """
    settings = Settings()

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Resolve the login wiring up front so missing gov.br credentials
        # fail startup instead of the first /login
        await container.get(AuthService)
        yield
        await container.close()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="gov.br SSO",
        description="Login with gov.br using OpenID Connect and PKCE",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Per-user session held in this process; the cookie only carries a
    # signed session id. Holds the pending login attempt and the citizen.
    session_store = InMemorySessionStore(max_age=settings.session.max_age)
    app_instance.state.session_store = session_store
    app_instance.add_middleware(
        ServerSessionMiddleware,
        store=session_store,
        secret_key=settings.session.secret_key,
        session_cookie=settings.session.cookie_name,
        max_age=settings.session.max_age,
        same_site=settings.session.same_site,
        https_only=settings.session.https_only,
    )

    setup_dishka(container, app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
