"""AI assistant use cases: ZIA chat and PQS email formatting."""

from app.application.use_cases.assistant.pqs_flow import PQSFlow
from app.application.use_cases.assistant.zia_flow import (
    SYSTEM_INSTRUCTION,
    TOOL_DECLARATIONS,
    ZiaFlow,
    to_jsonable,
)

__all__ = [
    "PQSFlow",
    "SYSTEM_INSTRUCTION",
    "TOOL_DECLARATIONS",
    "ZiaFlow",
    "to_jsonable",
]
