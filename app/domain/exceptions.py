"""Domain exceptions for the ZYCLE application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ZycleException(Exception):
    """Base exception for all ZYCLE application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ZycleException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(ZycleException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class MissingTenantException(ZycleException):
    """Raised when an operation that must be tenant-scoped receives no tenant ID."""

    def __init__(self, operation: str) -> None:
        """Initialize with the operation that required a tenant.

        Args:
            operation: Name of the operation (e.g. 'zia').
        """
        super().__init__(
            "User ID is missing from the request.",
            "MISSING_TENANT",
            {"operation": operation},
        )


class EmailAlreadyRegisteredException(ZycleException):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email is already registered",
            "EMAIL_ALREADY_REGISTERED",
            {"email": email},
        )


class ResourceNotFoundException(ZycleException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'material', 'loan').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class CompanyProfileRequiredException(ZycleException):
    """Raised when invoicing is attempted before the company profile is set up."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(
            "Complete the company profile before issuing invoices",
            "PROFILE_REQUIRED",
            {"tenant_id": tenant_id},
        )


class InsufficientStockException(ZycleException):
    """Raised when a sale requests more kilograms than a material has in stock."""

    def __init__(
        self,
        material_id: str,
        material_name: str,
        available: float,
        requested: float,
    ) -> None:
        """Initialize with the material and the quantities involved.

        Args:
            material_id: Material being sold.
            material_name: Display name for the message.
            available: Current stock in kg.
            requested: Total kg requested in the sale for this material.
        """
        super().__init__(
            f"Insufficient stock for {material_name}: "
            f"{available:g} kg available, {requested:g} kg requested",
            "INSUFFICIENT_STOCK",
            {
                "material_id": material_id,
                "available": available,
                "requested": requested,
            },
        )


class LoanStateException(ZycleException):
    """Raised when a loan operation conflicts with its balance or status."""

    def __init__(self, loan_id: str, reason: str) -> None:
        super().__init__(reason, "LOAN_STATE", {"loan_id": loan_id})


class CashBoxStateException(ZycleException):
    """Raised when a cash-box operation does not match the day's box state (missing, open, closed)."""

    def __init__(self, box_id: str, reason: str) -> None:
        super().__init__(reason, "CASH_BOX_STATE", {"cash_box_id": box_id})
