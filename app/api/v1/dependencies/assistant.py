"""Generative model, ZIA and PQS dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from app.application.interfaces.services import IGenerativeModel
from app.application.services import DataService
from app.application.use_cases import PQSFlow, ZiaFlow
from app.core.config import get_settings
from app.infrastructure.services import PQSTemplateRenderer

from .services import get_data_service


def get_generative_model(request: Request) -> IGenerativeModel:
    """Shared Gemini client from app.state; 503 when no API key is configured."""
    model = getattr(request.app.state, "gemini_client", None)
    if model is None:
        raise HTTPException(
            status_code=503,
            detail="Assistant not configured (set GEMINI_API_KEY)",
        )
    return model


def get_zia_flow(
    model: Annotated[IGenerativeModel, Depends(get_generative_model)],
    data_service: Annotated[DataService, Depends(get_data_service)],
) -> ZiaFlow:
    settings = get_settings()
    return ZiaFlow(
        model,
        data_service,
        max_tool_rounds=settings.zia_max_tool_rounds,
        recent_records=settings.zia_recent_records,
    )


def get_pqs_flow(
    model: Annotated[IGenerativeModel, Depends(get_generative_model)],
) -> PQSFlow:
    return PQSFlow(model, PQSTemplateRenderer())
