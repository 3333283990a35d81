"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Firestore client, repositories, use-case
services and the authenticated user. Routes depend only on these, never on
infrastructure directly.
"""

from .assistant import get_generative_model, get_pqs_flow, get_zia_flow
from .auth import (
    AuthSecurity,
    get_auth_security,
    get_auth_service,
    get_current_actor,
    get_current_user,
    get_current_user_optional,
    get_tenant_id,
    get_user_repo,
)
from .db import get_firestore
from .services import (
    get_associate_service,
    get_attendance_service,
    get_cash_box_service,
    get_collaborator_service,
    get_company_profile_service,
    get_data_service,
    get_export_service,
    get_invoice_service,
    get_loan_service,
    get_material_service,
    get_position_service,
    get_report_service,
    get_source_collection_service,
    get_source_point_service,
    get_vehicle_service,
    get_workbook_writer,
)

__all__ = [
    "AuthSecurity",
    "get_associate_service",
    "get_attendance_service",
    "get_auth_security",
    "get_auth_service",
    "get_cash_box_service",
    "get_collaborator_service",
    "get_company_profile_service",
    "get_current_actor",
    "get_current_user",
    "get_current_user_optional",
    "get_data_service",
    "get_export_service",
    "get_firestore",
    "get_generative_model",
    "get_invoice_service",
    "get_loan_service",
    "get_material_service",
    "get_pqs_flow",
    "get_position_service",
    "get_report_service",
    "get_source_collection_service",
    "get_source_point_service",
    "get_tenant_id",
    "get_user_repo",
    "get_vehicle_service",
    "get_workbook_writer",
    "get_zia_flow",
]
