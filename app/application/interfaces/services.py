"""Service interfaces (ports) for the application layer.

Protocols define contracts for external services (DIP).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from app.application.dtos.assistant import PQSSubmission
from app.application.dtos.report import ExportTable


@dataclass(frozen=True)
class FunctionCall:
    """A tool invocation requested by the generative model."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationResult:
    """One model turn: optional text, requested tool calls and the raw content.

    ``content`` is the model's turn in wire format, appended to the
    conversation before tool responses are sent back.
    """

    text: str | None
    function_calls: list[FunctionCall]
    content: dict[str, Any]


class IGenerativeModel(Protocol):
    """Protocol for a hosted generative model with function calling."""

    async def generate_content(
        self,
        contents: list[dict[str, Any]],
        system_instruction: str | None = None,
        tools: list[dict[str, Any]] | None = None,
    ) -> GenerationResult:
        """Send the conversation and return the model's next turn."""

    async def generate_text(self, prompt: str) -> str | None:
        """Single-prompt generation without tools."""


class IAuthSecurity(Protocol):
    """Protocol for token issuing and password hashing (provided via DI)."""

    def create_access_token(self, data: dict[str, Any]) -> str:
        """Return a signed access token for the given claims."""

    def create_password_reset_token(self, user_id: str, email: str) -> str:
        """Return a short-lived password reset token."""

    def verify_password_reset_token(self, token: str) -> dict[str, Any]:
        """Return reset token claims; raise ValueError if invalid or expired."""

    async def hash_password(self, password: str) -> str:
        """Return a password hash (computed off the event loop)."""

    async def verify_password(self, password: str, hashed: str | None) -> bool:
        """Check a password; a missing hash never matches."""


class IPQSPromptRenderer(Protocol):
    """Protocol for rendering the PQS formatting prompt."""

    def render(self, submission: PQSSubmission) -> str:
        """Return the prompt text for the submission."""


class IWorkbookWriter(Protocol):
    """Protocol for serializing an export table to a spreadsheet file."""

    media_type: str
    extension: str

    def write(self, table: ExportTable) -> bytes:
        """Return the file contents for one sheet holding the table."""
