"""Authentication router: CSRF token, sign-up, login, logout, profile update."""

import logging
from typing import Annotated, Optional

from fastapi import (
    APIRouter,
    File,
    Form,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)

from cookmeet.application.commands import UpdateUserCommand
from cookmeet.domain.shared.exceptions import ConflictError, ValidationError
from cookmeet.presentation.api.csrf import get_csrf_token
from cookmeet.presentation.api.dependencies import (
    TOKEN_COOKIE,
    AuthService,
    DBSession,
    PasswordServiceDep,
    RepoFactory,
    SettingsDep,
    StorageDep,
)
from cookmeet.presentation.api.routers._forms import blank_to_none, read_icon
from cookmeet.presentation.api.schemas import (
    CsrfTokenResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
)
from cookmeet_auth import InvalidPasswordError, WeakPasswordError
from cookmeet_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_token_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token.

    Scripts cannot read it, and ``api_cookie_secure`` and
    ``api_cookie_samesite`` decide whether it crosses origins.
    """
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.cookie_max_age_seconds,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _clear_token_cookie(response: Response, settings: Settings) -> None:
    """Tell the browser to drop the session token."""
    response.delete_cookie(
        key=TOKEN_COOKIE,
        path="/",
        domain=settings.api_cookie_domain,
        secure=settings.api_cookie_secure,
        httponly=True,
        samesite=settings.api_cookie_samesite,
    )


@router.get("/csrf", summary="Issue a CSRF token")
async def csrf_token(request: Request) -> CsrfTokenResponse:
    """Return the token clients must echo in ``X-CSRF-Token``."""
    return CsrfTokenResponse(csrf_token=get_csrf_token(request))


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Invalid input"},
        409: {"description": "Email is taken"},
    },
)
async def sign_up(
    request: SignUpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    try:
        user = await auth_service.sign_up(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except WeakPasswordError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except Exception:
        await session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return UserResponse.from_domain(user)


@router.post(
    "/login",
    summary="Log in",
    responses={
        200: {"description": "Login successful, token cookie set"},
        400: {"description": "Invalid input"},
        401: {"description": "Invalid password"},
        404: {"description": "Unknown email"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> Response:
    """
    Check the credentials and start a session.

    The signed access token is set as an HttpOnly cookie; the body is empty.
    """
    try:
        _, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    except InvalidPasswordError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e

    response = Response(status_code=status.HTTP_200_OK)
    _set_token_cookie(response, token, settings)
    return response


@router.post("/logout", summary="Clear the session cookie")
async def logout(settings: SettingsDep) -> Response:
    response = Response(status_code=status.HTTP_200_OK)
    _clear_token_cookie(response, settings)
    return response


@router.put(
    "/update",
    summary="Update the current user's profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input or email already taken"},
        401: {"description": "Not authenticated"},
    },
)
async def update_user(  # NOQA: PLR0913
    factory: RepoFactory,
    storage: StorageDep,
    password_service: PasswordServiceDep,
    settings: SettingsDep,
    name: Annotated[Optional[str], Form()] = None,
    email: Annotated[Optional[str], Form()] = None,
    password: Annotated[Optional[str], Form()] = None,
    icon: Annotated[Optional[UploadFile], File()] = None,
) -> UserResponse:
    """
    Overwrite only the supplied profile fields.

    Empty form fields count as not supplied. An icon is stored under a
    content-addressed key, so re-uploading the same image is idempotent.
    """
    command = UpdateUserCommand.from_factory(
        factory,
        storage=storage,
        password_service=password_service,
        bucket=settings.storage_bucket,
    )

    try:
        user = await command.execute(
            name=blank_to_none(name),
            email=blank_to_none(email),
            password=blank_to_none(password),
            icon=await read_icon(icon),
        )
        await factory.session.commit()
    except (ValidationError, ConflictError, WeakPasswordError) as e:
        await factory.session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_domain(user)
