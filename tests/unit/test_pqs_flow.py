"""PQSFlow and PQS prompt template tests."""

import logging
from unittest.mock import AsyncMock

from app.application.dtos.assistant import PQSSubmission
from app.application.use_cases.assistant import PQSFlow
from app.infrastructure.services import PQSTemplateRenderer

SUBMISSION = PQSSubmission(
    collaborator_name="Luis Gómez",
    collaborator_email="luis@example.com",
    subject="Turnos de fin de semana",
    message="Solicito revisar la asignación de turnos para los sábados.",
    company_email="rrhh@example.com",
)


def test_template_includes_all_fields() -> None:
    prompt = PQSTemplateRenderer().render(SUBMISSION)
    assert "rrhh@example.com" in prompt
    assert "Nueva PQS Recibida: Turnos de fin de semana" in prompt
    assert "Luis Gómez" in prompt
    assert "luis@example.com" in prompt
    assert SUBMISSION.message in prompt


def test_template_can_be_replaced() -> None:
    renderer = PQSTemplateRenderer("{{ subject }} / {{ company_email }}")
    assert renderer.render(SUBMISSION) == "Turnos de fin de semana / rrhh@example.com"


async def test_send_logs_generated_email(caplog) -> None:
    model = AsyncMock()
    model.generate_text.return_value = "Asunto: Nueva PQS"
    flow = PQSFlow(model, PQSTemplateRenderer())

    with caplog.at_level(logging.INFO):
        result = await flow.send(SUBMISSION)

    assert result == {"success": True}
    model.generate_text.assert_awaited_once()
    assert "TO: rrhh@example.com" in caplog.text
    assert "Asunto: Nueva PQS" in caplog.text


async def test_send_succeeds_when_model_returns_nothing() -> None:
    model = AsyncMock()
    model.generate_text.return_value = None
    flow = PQSFlow(model, PQSTemplateRenderer())

    assert await flow.send(SUBMISSION) == {"success": True}
