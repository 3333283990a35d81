"""Firestore-backed repository implementations."""

from app.infrastructure.firebase.repositories.cash_box_repo_firestore import (
    FirestoreCashBoxRepository,
)
from app.infrastructure.firebase.repositories.catalog_repo_firestore import (
    FirestoreAssociateRepository,
    FirestoreAttendanceRepository,
    FirestoreCollaboratorRepository,
    FirestorePositionRepository,
    FirestoreSourcePointRepository,
    FirestoreVehicleRepository,
)
from app.infrastructure.firebase.repositories.company_profile_repo_firestore import (
    FirestoreCompanyProfileRepository,
)
from app.infrastructure.firebase.repositories.invoice_repo_firestore import (
    FirestorePurchaseInvoiceRepository,
    FirestoreSaleInvoiceRepository,
)
from app.infrastructure.firebase.repositories.loan_repo_firestore import (
    FirestoreLoanRepository,
)
from app.infrastructure.firebase.repositories.material_repo_firestore import (
    FirestoreMaterialRepository,
)
from app.infrastructure.firebase.repositories.source_collection_repo_firestore import (
    FirestoreSourceCollectionRepository,
)
from app.infrastructure.firebase.repositories.user_repo_firestore import (
    FirestoreUserRepository,
)

__all__ = [
    "FirestoreAssociateRepository",
    "FirestoreAttendanceRepository",
    "FirestoreCashBoxRepository",
    "FirestoreCollaboratorRepository",
    "FirestoreCompanyProfileRepository",
    "FirestoreLoanRepository",
    "FirestoreMaterialRepository",
    "FirestorePositionRepository",
    "FirestorePurchaseInvoiceRepository",
    "FirestoreSaleInvoiceRepository",
    "FirestoreSourceCollectionRepository",
    "FirestoreSourcePointRepository",
    "FirestoreUserRepository",
    "FirestoreVehicleRepository",
]
