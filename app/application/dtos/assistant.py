"""DTOs for the ZIA assistant and the PQS email flow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatTurn:
    """One prior turn of the conversation; role is 'user' or 'model'."""

    role: str
    content: str


@dataclass(frozen=True)
class PQSSubmission:
    """Petition, complaint or suggestion sent by a collaborator."""

    collaborator_name: str
    collaborator_email: str
    subject: str
    message: str
    company_email: str
