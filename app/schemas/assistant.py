"""ZIA chat and PQS API schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.domain.enums import ChatRole


class ChatTurnRequest(BaseModel):
    """A prior turn; ``assistant`` is accepted as an alias of ``model``."""

    role: ChatRole
    content: str

    @field_validator("role", mode="before")
    @classmethod
    def _assistant_alias(cls, v: str) -> str:
        return ChatRole.MODEL.value if v == "assistant" else v


class ZiaChatRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=4000)
    history: list[ChatTurnRequest] = Field(default_factory=list)


class ZiaChatResponse(BaseModel):
    response: str


class PQSRequest(BaseModel):
    """Petition, complaint or suggestion from a collaborator."""

    collaborator_name: str = Field(..., min_length=1, max_length=100)
    collaborator_email: EmailStr
    subject: str = Field(..., min_length=5, max_length=100)
    message: str = Field(..., min_length=20, max_length=2000)
    company_email: EmailStr


class PQSResponse(BaseModel):
    success: bool
