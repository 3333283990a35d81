"""Account use cases: authentication and company profile."""

from app.application.use_cases.accounts.auth_operations import AuthService
from app.application.use_cases.accounts.company_profile_operations import (
    CompanyProfileService,
)

__all__ = ["AuthService", "CompanyProfileService"]
