"""gov.br login routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from sso.adapter.govbr import MappingSessionContext
from sso.application.usecase.auth import (
    CompleteLoginUseCase,
    GetCurrentUserUseCase,
    LogoutUseCase,
    StartLoginUseCase,
)
from sso.domain.value import CallbackParams
from sso.interface.error import NotAuthenticatedError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


def _session(request: Request) -> MappingSessionContext:
    return MappingSessionContext(request.session)


@router.get("/")
async def index() -> RedirectResponse:
    """Send the browser to the current user's profile."""
    return RedirectResponse(url="/user", status_code=status.HTTP_302_FOUND)


@router.get("/login")
async def login(
    request: Request,
    use_case: FromDishka[StartLoginUseCase],
) -> RedirectResponse:
    """Start a gov.br login.

    A new state, nonce and PKCE verifier are stored in the session and the
    browser is redirected to the gov.br authorization endpoint.
    """
    response = await use_case.execute(_session(request))
    return RedirectResponse(
        url=response.authorization_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/openid")
async def openid_callback(
    request: Request,
    use_case: FromDishka[CompleteLoginUseCase],
    code: str | None = Query(default=None),
    state: str | None = Query(default=None),
    error: str | None = Query(default=None),
    error_description: str | None = Query(default=None),
):
    """Handle the gov.br redirect.

    Args:
        request: Incoming request (owns the session)
        use_case: Complete login use case from DI
        code: Authorization code
        state: State echoed back by gov.br
        error: Provider error code, e.g. ``access_denied``
        error_description: Provider error text

    Returns:
        302 to ``/`` on success, or 400 with the provider's error payload

    Raises:
        SecurityViolationError: Rendered as 400 by the error handlers
        ProviderError: Rendered as 502 by the error handlers
    """
    params = CallbackParams(
        code=code, state=state, error=error, error_description=error_description
    )
    outcome = await use_case.execute(params, _session(request))

    if outcome.kind == "error":
        logger.info(f"Login not completed, provider error: {outcome.error}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=outcome.model_dump(exclude={"kind"}),
        )

    return RedirectResponse(url=outcome.url, status_code=status.HTTP_302_FOUND)


@router.get("/user")
async def current_user(
    request: Request,
    use_case: FromDishka[GetCurrentUserUseCase],
) -> JSONResponse:
    """Return the logged-in citizen with gov.br claim names.

    Raises:
        NotAuthenticatedError: Rendered as 401 when nobody is logged in
    """
    user = await use_case.execute(_session(request))
    if user is None:
        raise NotAuthenticatedError("User not logged in")

    return JSONResponse(content=user.model_dump(mode="json", by_alias=True))


@router.get("/logout")
async def logout(
    request: Request,
    use_case: FromDishka[LogoutUseCase],
) -> RedirectResponse:
    """Destroy the local session and end the gov.br session."""
    response = await use_case.execute(_session(request))
    return RedirectResponse(
        url=response.end_session_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/logout/govbr")
async def logout_landing() -> RedirectResponse:
    """Landing point after gov.br ends its session."""
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
