"""PQS (petitions, complaints, suggestions) endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_current_user, get_pqs_flow
from app.application.dtos.assistant import PQSSubmission
from app.application.dtos.user import UserResult
from app.application.use_cases.assistant import PQSFlow
from app.core.limiter import limit_ai
from app.schemas.assistant import PQSRequest, PQSResponse

router = APIRouter()


@router.post("", response_model=PQSResponse)
@limit_ai
async def send_pqs(
    request: Request,
    body: PQSRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    flow: Annotated[PQSFlow, Depends(get_pqs_flow)],
):
    """Draft the PQS e-mail with the model and log it."""
    result = await flow.send(PQSSubmission(**body.model_dump()))
    return PQSResponse(**result)
