"""ZIA, the ZYCLE Intelligent Assistant.

Answers questions about a tenant's business data. The model may request any
of three argument-free tools; they are bound to the caller's tenant here, so
the model can never reach another tenant's data.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from app.application.dtos.assistant import ChatTurn
from app.application.interfaces.services import FunctionCall, IGenerativeModel
from app.application.services.data_service import DataService
from app.core.constants import ZIA_FALLBACK_RESPONSE
from app.domain.enums import ChatRole
from app.domain.exceptions import MissingTenantException
from app.shared.telemetry import add_span_attributes, add_span_event, traced

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """\
You are ZIA, the ZYCLE Intelligent Assistant. You are a friendly and helpful AI expert in recycling business operations.
Your goal is to answer the user's questions about their company data using the tools you have.
- If the user's query is a greeting, a simple question, or something you can answer without tools, respond naturally and conversationally.
- Use the get_inventory tool for questions about stock levels, what materials exist, or which materials are low.
- Use the get_recent_purchases tool for questions about recent buying activity.
- Use the get_recent_sales tool for questions about recent selling activity.
- When you get data from a tool, synthesize it into a natural, easy-to-read summary. Never dump raw data or JSON.
- Be concise.
- IMPORTANT: Always respond in Spanish.
- If you cannot answer the question with the available tools, say so politely."""

TOOL_DECLARATIONS: list[dict[str, Any]] = [
    {
        "name": "get_inventory",
        "description": (
            "Returns all materials in the company's inventory with their "
            "current stock in kilograms, highest stock first."
        ),
    },
    {
        "name": "get_recent_purchases",
        "description": (
            "Returns the most recent purchase invoices with items, totals and "
            "dates. Useful for questions about recent buying activity."
        ),
    },
    {
        "name": "get_recent_sales",
        "description": (
            "Returns the most recent sale invoices with items, totals and "
            "dates. Useful for questions about recent selling activity."
        ),
    },
]


def to_jsonable(value: Any) -> Any:
    """Convert DTOs, enums and datetimes into JSON-safe structures."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _text_turn(role: str, text: str) -> dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


class ZiaFlow:
    """Runs the tool-calling loop until the model answers with text."""

    def __init__(
        self,
        model: IGenerativeModel,
        data_service: DataService,
        max_tool_rounds: int = 10,
        recent_records: int = 5,
    ) -> None:
        self._model = model
        self._data = data_service
        self._max_tool_rounds = max_tool_rounds
        self._recent_records = recent_records

    def _tools_for(self, tenant_id: str) -> dict[str, Callable[[], Awaitable[Any]]]:
        return {
            "get_inventory": lambda: self._data.get_inventory(tenant_id=tenant_id),
            "get_recent_purchases": lambda: self._data.get_recent_purchases(
                tenant_id=tenant_id, limit=self._recent_records
            ),
            "get_recent_sales": lambda: self._data.get_recent_sales(
                tenant_id=tenant_id, limit=self._recent_records
            ),
        }

    async def _run_tool(
        self, tools: dict[str, Callable[[], Awaitable[Any]]], call: FunctionCall
    ) -> dict[str, Any]:
        tool = tools.get(call.name)
        add_span_event("zia.tool_call", {"tool": call.name})
        if tool is None:
            logger.warning("Model requested unknown tool %s", call.name)
            return {"error": f"Unknown tool: {call.name}"}
        return {"result": to_jsonable(await tool())}

    @traced("zia.ask")
    async def ask(
        self,
        query: str,
        history: list[ChatTurn],
        tenant_id: str,
    ) -> str:
        """Answer ``query`` given prior turns; returns the fallback on empty output.

        Raises:
            MissingTenantException: If tenant_id is empty (before any model call).
        """
        if not tenant_id:
            raise MissingTenantException("zia.ask")

        tools = self._tools_for(tenant_id)
        contents = [
            _text_turn(ChatRole(turn.role).value, turn.content) for turn in history
        ]
        contents.append(_text_turn(ChatRole.USER.value, query))

        for round_number in range(1, self._max_tool_rounds + 1):
            result = await self._model.generate_content(
                contents,
                system_instruction=SYSTEM_INSTRUCTION,
                tools=TOOL_DECLARATIONS,
            )
            if not result.function_calls:
                add_span_attributes(rounds=round_number)
                return result.text or ZIA_FALLBACK_RESPONSE

            contents.append(result.content)
            responses = []
            for call in result.function_calls:
                responses.append(
                    {
                        "functionResponse": {
                            "name": call.name,
                            "response": await self._run_tool(tools, call),
                        }
                    }
                )
            contents.append({"role": ChatRole.USER.value, "parts": responses})

        logger.warning(
            "ZIA stopped after %d tool rounds for tenant %s",
            self._max_tool_rounds,
            tenant_id,
        )
        return ZIA_FALLBACK_RESPONSE
