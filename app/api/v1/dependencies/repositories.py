"""Firestore repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.infrastructure.firebase import FirestoreRESTClient
from app.infrastructure.firebase.repositories import (
    FirestoreAssociateRepository,
    FirestoreAttendanceRepository,
    FirestoreCashBoxRepository,
    FirestoreCollaboratorRepository,
    FirestoreCompanyProfileRepository,
    FirestoreLoanRepository,
    FirestoreMaterialRepository,
    FirestorePositionRepository,
    FirestorePurchaseInvoiceRepository,
    FirestoreSaleInvoiceRepository,
    FirestoreSourceCollectionRepository,
    FirestoreSourcePointRepository,
    FirestoreVehicleRepository,
)

from .db import get_firestore

Firestore = Annotated[FirestoreRESTClient, Depends(get_firestore)]


def get_company_profile_repo(client: Firestore) -> FirestoreCompanyProfileRepository:
    return FirestoreCompanyProfileRepository(client)


def get_material_repo(client: Firestore) -> FirestoreMaterialRepository:
    return FirestoreMaterialRepository(client)


def get_purchase_repo(client: Firestore) -> FirestorePurchaseInvoiceRepository:
    return FirestorePurchaseInvoiceRepository(client)


def get_sale_repo(client: Firestore) -> FirestoreSaleInvoiceRepository:
    return FirestoreSaleInvoiceRepository(client)


def get_loan_repo(client: Firestore) -> FirestoreLoanRepository:
    return FirestoreLoanRepository(client)


def get_source_point_repo(client: Firestore) -> FirestoreSourcePointRepository:
    return FirestoreSourcePointRepository(client)


def get_source_collection_repo(
    client: Firestore,
) -> FirestoreSourceCollectionRepository:
    return FirestoreSourceCollectionRepository(client)


def get_associate_repo(client: Firestore) -> FirestoreAssociateRepository:
    return FirestoreAssociateRepository(client)


def get_vehicle_repo(client: Firestore) -> FirestoreVehicleRepository:
    return FirestoreVehicleRepository(client)


def get_position_repo(client: Firestore) -> FirestorePositionRepository:
    return FirestorePositionRepository(client)


def get_collaborator_repo(client: Firestore) -> FirestoreCollaboratorRepository:
    return FirestoreCollaboratorRepository(client)


def get_attendance_repo(client: Firestore) -> FirestoreAttendanceRepository:
    return FirestoreAttendanceRepository(client)


def get_cash_box_repo(client: Firestore) -> FirestoreCashBoxRepository:
    return FirestoreCashBoxRepository(client)
