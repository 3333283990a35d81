"""ZiaFlow tests: tenant guard, fallback, tool loop and round ceiling."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.assistant import ChatTurn
from app.application.dtos.material import MaterialResult
from app.application.interfaces.services import FunctionCall, GenerationResult
from app.application.use_cases.assistant import (
    SYSTEM_INSTRUCTION,
    TOOL_DECLARATIONS,
    ZiaFlow,
    to_jsonable,
)
from app.core.constants import ZIA_FALLBACK_RESPONSE
from app.domain.exceptions import MissingTenantException
from tests.conftest import text_result


def _tool_turn(*names: str) -> GenerationResult:
    parts = [{"functionCall": {"name": n, "args": {}}} for n in names]
    return GenerationResult(
        text=None,
        function_calls=[FunctionCall(name=n) for n in names],
        content={"role": "model", "parts": parts},
    )


@pytest.fixture
def data_service() -> AsyncMock:
    service = AsyncMock()
    service.get_inventory.return_value = [
        MaterialResult(
            id="m1",
            name="Cartón",
            price=500.0,
            code="101",
            stock=120.0,
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
    ]
    service.get_recent_purchases.return_value = []
    service.get_recent_sales.return_value = []
    return service


async def test_missing_tenant_raises_before_model_call(data_service) -> None:
    model = AsyncMock()
    flow = ZiaFlow(model, data_service)
    with pytest.raises(MissingTenantException):
        await flow.ask(query="hola", history=[], tenant_id="")
    model.generate_content.assert_not_called()


async def test_plain_answer_sends_history_and_query(data_service) -> None:
    model = AsyncMock()
    model.generate_content.return_value = text_result("¡Hola!")
    flow = ZiaFlow(model, data_service)

    answer = await flow.ask(
        query="¿Cómo estás?",
        history=[ChatTurn(role="user", content="hola"), ChatTurn(role="model", content="hola")],
        tenant_id="t1",
    )

    assert answer == "¡Hola!"
    contents = model.generate_content.call_args.args[0]
    assert [c["role"] for c in contents] == ["user", "model", "user"]
    assert contents[-1]["parts"] == [{"text": "¿Cómo estás?"}]
    kwargs = model.generate_content.call_args.kwargs
    assert kwargs["system_instruction"] == SYSTEM_INSTRUCTION
    assert kwargs["tools"] == TOOL_DECLARATIONS
    data_service.get_inventory.assert_not_called()


async def test_empty_answer_returns_fallback(data_service) -> None:
    model = AsyncMock()
    model.generate_content.return_value = text_result(None)
    flow = ZiaFlow(model, data_service)

    answer = await flow.ask(query="?", history=[], tenant_id="t1")

    assert answer == ZIA_FALLBACK_RESPONSE


async def test_tool_call_runs_for_tenant_and_feeds_result_back(data_service) -> None:
    model = AsyncMock()
    model.generate_content.side_effect = [
        _tool_turn("get_inventory", "get_recent_sales"),
        text_result("Tienes 120 kg de cartón."),
    ]
    flow = ZiaFlow(model, data_service, recent_records=3)

    answer = await flow.ask(query="¿Qué stock tengo?", history=[], tenant_id="t1")

    assert answer == "Tienes 120 kg de cartón."
    data_service.get_inventory.assert_awaited_once_with(tenant_id="t1")
    data_service.get_recent_sales.assert_awaited_once_with(tenant_id="t1", limit=3)
    second_call_contents = model.generate_content.call_args_list[1].args[0]
    assert second_call_contents[1]["role"] == "model"
    responses = second_call_contents[2]["parts"]
    assert [r["functionResponse"]["name"] for r in responses] == [
        "get_inventory",
        "get_recent_sales",
    ]
    inventory = responses[0]["functionResponse"]["response"]["result"]
    assert inventory[0]["name"] == "Cartón"
    assert inventory[0]["created_at"] == "2025-01-01T00:00:00+00:00"


async def test_unknown_tool_gets_error_payload(data_service) -> None:
    model = AsyncMock()
    model.generate_content.side_effect = [_tool_turn("drop_tables"), text_result("No puedo.")]
    flow = ZiaFlow(model, data_service)

    await flow.ask(query="x", history=[], tenant_id="t1")

    contents = model.generate_content.call_args_list[1].args[0]
    response = contents[-1]["parts"][0]["functionResponse"]["response"]
    assert "error" in response


async def test_round_ceiling_returns_fallback(data_service) -> None:
    model = AsyncMock()
    model.generate_content.return_value = _tool_turn("get_inventory")
    flow = ZiaFlow(model, data_service, max_tool_rounds=2)

    answer = await flow.ask(query="x", history=[], tenant_id="t1")

    assert answer == ZIA_FALLBACK_RESPONSE
    assert model.generate_content.await_count == 2


def test_to_jsonable_converts_datetimes_and_tuples() -> None:
    value = to_jsonable({"when": datetime(2025, 1, 1), "items": (1, 2)})
    assert value == {"when": "2025-01-01T00:00:00", "items": [1, 2]}
