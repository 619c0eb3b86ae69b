"""Exception handlers mapping layer errors to HTTP responses.

Response bodies are fixed strings; provider status codes, bodies and the
reason for a security violation only go to the logs.
"""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sso.domain.error import ProviderError, SecurityViolationError
from sso.interface.error import NotAuthenticatedError
from sso.util.error import DigestUnavailableError

logger = logging.getLogger(__name__)


def error_body(message: str, code: int) -> dict:
    return {"error": message, "code": code}


async def security_violation_handler(
    request: Request, exc: SecurityViolationError
) -> JSONResponse:
    logfire.warn(
        "Rejected callback",
        reason=exc.reason,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid login session", status.HTTP_400_BAD_REQUEST),
    )


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    logfire.error(
        "gov.br request failed",
        error_type=type(exc).__name__,
        error=str(exc),
        provider_status=exc.status_code,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=error_body(
            "Authentication with provider failed", status.HTTP_502_BAD_GATEWAY
        ),
    )


async def digest_unavailable_handler(
    request: Request, exc: DigestUnavailableError
) -> JSONResponse:
    logger.error(f"Cannot build login URL: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
    )


async def not_authenticated_handler(
    request: Request, exc: NotAuthenticatedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body("User not logged in", status.HTTP_401_UNAUTHORIZED),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach every handler to the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(SecurityViolationError, security_violation_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(DigestUnavailableError, digest_unavailable_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
