"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field, model_validator

from app.schemas.user import UserResponse


class _PasswordConfirmation(BaseModel):
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    confirm_password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("password and confirm_password must match")
        return self


class RegisterRequest(_PasswordConfirmation):
    """Request body for owner registration; the new user becomes a tenant."""

    email: EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(_PasswordConfirmation):
    """Request body for POST /auth/reset-password."""

    token: str = Field(..., min_length=1, description="Token from the reset link")


class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
