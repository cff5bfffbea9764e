"""Account and session API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser, OptionalUser
from api.v1.dependencies import get_account_service, get_navigator
from api.v1.schemas.auth import (
    LoginRequest,
    ScreenResponse,
    SessionResponse,
    SignOutResponse,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from api.v1.schemas.common import ErrorResponse
from core.rate_limit import AUTH_LIMIT, READ_LIMIT, limiter
from domain.services.account_service import AccountService
from domain.viewmodels.ports import RecordingNavigator, StaticSession
from domain.viewmodels.shell import NavigationShell

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account and profile created"},
        400: {"model": ErrorResponse, "description": "Missing fields or passwords differ"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def sign_up(
    request: Request,
    body: SignUpRequest,
    service: AccountService = Depends(get_account_service),
    navigator: RecordingNavigator = Depends(get_navigator),
) -> SignUpResponse:
    """Create an account plus its profile, then point the client at Login."""
    account = await service.sign_up(
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
        navigator=navigator,
    )
    return SignUpResponse.collect(navigator, email=account.email)  # type: ignore[no-any-return]


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Sign in",
    responses={
        200: {"description": "Session token issued"},
        401: {"model": ErrorResponse, "description": "Credentials rejected"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    issued = await service.sign_in(body.email, body.password)
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        expires_in=issued.expires_in,
        email=issued.email,
    )


@router.post(
    "/logout",
    response_model=SignOutResponse,
    summary="Sign out",
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def logout(
    request: Request,
    user: CurrentUser,
    service: AccountService = Depends(get_account_service),
    navigator: RecordingNavigator = Depends(get_navigator),
) -> SignOutResponse:
    """Revoke the presented token and return to the signed-out flow."""
    await service.sign_out(user.token_id, user.email)
    navigator.navigate(NavigationShell(StaticSession()).initial_screen)
    return SignOutResponse.collect(navigator, message="Signed out")  # type: ignore[no-any-return]


session_router = APIRouter(prefix="/session", tags=["session"])


@session_router.get(
    "",
    response_model=SessionResponse,
    summary="Current session and flow",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_session(request: Request, user: OptionalUser) -> SessionResponse:
    """Report who is signed in and which screens the shell should offer."""
    shell = NavigationShell(user or StaticSession())
    return SessionResponse(
        authenticated=user is not None,
        email=user.email if user else None,
        flow=shell.flow.value,
        initial_screen=shell.initial_screen.value,
        screens=[
            ScreenResponse(screen=entry.screen.value, title=entry.title) for entry in shell.screens
        ],
    )
