"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    ICashBoxRepository,
    ICompanyProfileRepository,
    IInvoiceRepository,
    ILoanRepository,
    IMaterialRepository,
    IPurchaseInvoiceRepository,
    ISaleInvoiceRepository,
    ISourceCollectionRepository,
    ITenantScopedRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    FunctionCall,
    GenerationResult,
    IAuthSecurity,
    IGenerativeModel,
    IPQSPromptRenderer,
    IWorkbookWriter,
)

__all__ = [
    "FunctionCall",
    "GenerationResult",
    "IAuthSecurity",
    "ICashBoxRepository",
    "ICompanyProfileRepository",
    "IGenerativeModel",
    "IInvoiceRepository",
    "ILoanRepository",
    "IMaterialRepository",
    "IPQSPromptRenderer",
    "IPurchaseInvoiceRepository",
    "ISaleInvoiceRepository",
    "ISourceCollectionRepository",
    "ITenantScopedRepository",
    "IUserRepository",
    "IWorkbookWriter",
]
