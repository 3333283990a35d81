"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from app.shared.telemetry.logging import (
    RequestIdFilter,
    request_id_var,
    setup_logging,
)
from app.shared.telemetry.telemetry import (
    Telemetry,
    get_telemetry,
    set_telemetry,
    setup_telemetry,
)
from app.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)

__all__ = [
    "setup_logging",
    "request_id_var",
    "RequestIdFilter",
    "Telemetry",
    "setup_telemetry",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "add_span_event",
]
