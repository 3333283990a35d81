"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    AuthenticationException,
    CashBoxStateException,
    CompanyProfileRequiredException,
    EmailAlreadyRegisteredException,
    InsufficientStockException,
    LoanStateException,
    MissingTenantException,
    ResourceNotFoundException,
    ValidationException,
    ZycleException,
)

__all__ = [
    "AuthenticationException",
    "CashBoxStateException",
    "CompanyProfileRequiredException",
    "EmailAlreadyRegisteredException",
    "InsufficientStockException",
    "LoanStateException",
    "MissingTenantException",
    "ResourceNotFoundException",
    "ValidationException",
    "ZycleException",
]
