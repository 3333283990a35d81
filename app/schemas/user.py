"""User API schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    email: str
    is_active: bool
