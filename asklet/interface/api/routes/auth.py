"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from asklet.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from asklet.application.usecase.base import CamelModel
from asklet.application.usecase.views import UserView
from asklet.config import Settings
from asklet.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from asklet.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = ""
    email: str = ""
    password: str = ""


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str = ""
    password: str = ""


class LoginAPIResponse(CamelModel):
    """Login response. The token itself only travels in the cookie."""

    message: str
    user: UserView


class LogoutResponse(BaseModel):
    """Logout response."""

    message: str


class MeResponse(CamelModel):
    """Current user response."""

    user: UserView


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create a new account.

    Args:
        request: Username, email and password
        register_use_case: Register use case from DI

    Returns:
        The created user

    Raises:
        HTTPException: 400 if a field is missing, invalid or already taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                username=request.username,
                email=request.email,
                password=request.password,
            )
        )
    except (ValidationError, BusinessRuleViolationError) as e:
        logfire.warn("Registration rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error during registration", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        )


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with email and password and set the auth cookie.

    Args:
        request: Email and password
        response: FastAPI response object (cookie is set on it)
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        Login message and the user

    Raises:
        HTTPException: 400 if a field is missing, 401 on bad credentials
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AuthenticationError as e:
        logfire.warn("Login failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error during login", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed",
        )

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=settings.auth.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    return LoginAPIResponse(message="Login successful", user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(message="Logged out")


@router.get("/me", response_model=MeResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MeResponse:
    """Get the user the auth cookie belongs to.

    Raises:
        HTTPException: 401 without a valid token, 404 if the user is gone
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="No token found"
        )

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        )
    except NotFoundError:
        # JWT valid but user not found in database (orphaned token)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return MeResponse(user=user)
