"""PQS (petition, complaint, suggestion) email flow.

The model formats the submission as a professional e-mail; the result is
logged. There is no delivery integration.
"""

from __future__ import annotations

import logging

from app.application.dtos.assistant import PQSSubmission
from app.application.interfaces.services import IGenerativeModel, IPQSPromptRenderer
from app.shared.telemetry import traced

logger = logging.getLogger(__name__)


class PQSFlow:
    def __init__(self, model: IGenerativeModel, renderer: IPQSPromptRenderer) -> None:
        self._model = model
        self._renderer = renderer

    @traced("pqs.send")
    async def send(self, submission: PQSSubmission) -> dict[str, bool]:
        """Generate the e-mail and log it; always reports success."""
        logger.info("PQS email flow started, generating email content")
        text = await self._model.generate_text(self._renderer.render(submission))
        logger.info("TO: %s\n%s", submission.company_email, text or "")
        return {"success": True}
