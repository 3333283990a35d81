"""Application layer: DTOs, interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (Firestore repos, Gemini client).
"""

from app.application.interfaces import (
    IAuthSecurity,
    ICompanyProfileRepository,
    IGenerativeModel,
    IMaterialRepository,
    IUserRepository,
)
from app.application.services import DataService

__all__ = [
    "DataService",
    "IAuthSecurity",
    "ICompanyProfileRepository",
    "IGenerativeModel",
    "IMaterialRepository",
    "IUserRepository",
]
