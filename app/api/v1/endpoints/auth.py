"""Auth API: register, login, current user and password reset."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_auth_service, get_current_user
from app.application.dtos.user import UserResult
from app.application.use_cases.accounts import AuthService
from app.core.limiter import limit_auth
from app.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
)
from app.schemas.user import UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a company owner. The new user's ID is the tenant ID."""
    user = await auth_service.register(body.email, body.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return a JWT."""
    result = await auth_service.login(body.email, body.password)
    return TokenResponse.model_validate(result, from_attributes=True)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserResult, Depends(get_current_user)],
):
    """Return the currently authenticated user. Requires Authorization: Bearer <token>."""
    return UserResponse.model_validate(current_user)


@router.post("/forgot-password", response_model=MessageResponse, status_code=202)
@limit_auth
async def forgot_password(
    request: Request,
    body: ForgotPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Issue a reset token if the e-mail is registered. Same answer either way."""
    await auth_service.request_password_reset(body.email)
    return MessageResponse(
        message="If the email is registered, a reset link has been sent"
    )


@router.post("/reset-password", response_model=MessageResponse)
@limit_auth
async def reset_password(
    request: Request,
    body: ResetPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Set a new password using a reset token."""
    await auth_service.reset_password(body.token, body.password)
    return MessageResponse(message="Password updated")
