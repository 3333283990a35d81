"""Health check endpoints. No auth; used for liveness and readiness checks."""

from fastapi import APIRouter, Request

from app.infrastructure.firebase import get_firestore_client
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(request: Request) -> ReadinessResponse:
    """Report which backing services are configured."""
    firestore = get_firestore_client() is not None
    assistant = getattr(request.app.state, "gemini_client", None) is not None
    return ReadinessResponse(
        status="ok" if firestore else "degraded",
        firestore=firestore,
        assistant=assistant,
    )
