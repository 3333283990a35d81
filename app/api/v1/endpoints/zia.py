"""ZIA assistant chat endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_tenant_id, get_zia_flow
from app.application.dtos.assistant import ChatTurn
from app.application.use_cases.assistant import ZiaFlow
from app.core.limiter import limit_ai
from app.schemas.assistant import ZiaChatRequest, ZiaChatResponse

router = APIRouter()


@router.post("/chat", response_model=ZiaChatResponse)
@limit_ai
async def chat(
    request: Request,
    body: ZiaChatRequest,
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    flow: Annotated[ZiaFlow, Depends(get_zia_flow)],
):
    """Answer a question about the tenant's inventory, purchases and sales."""
    history = [ChatTurn(role=t.role.value, content=t.content) for t in body.history]
    answer = await flow.ask(query=body.query, history=history, tenant_id=tenant_id)
    return ZiaChatResponse(response=answer)
