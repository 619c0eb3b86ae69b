"""Logfire setup for the login service.

Services emit structured events and spans directly:

    logfire.info("gov.br authorization initiated", redirect_uri=...)
    with logfire.span("govbr.complete_login"):
        ...

Attributes must never carry tokens, authorization codes, PKCE verifiers or
the client secret.
"""

import logfire
from fastapi import FastAPI

from sso.config import ObservabilitySettings, Settings

SERVICE_NAME = "govbr-sso"
SERVICE_VERSION = "0.1.0"


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without OBSERVABILITY__LOGFIRE_TOKEN events only go to the console.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # "values" holds the validated endpoint arguments, which for /openid are
    # the authorization code and state
    mapped = {k: v for k, v in attributes.items() if k != "values"}
    mapped["method"] = getattr(request, "method", None)
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests without headers (they carry the session cookie).

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_httpx() -> None:
    """Trace the outbound token and userinfo calls to gov.br."""
    logfire.instrument_httpx()
