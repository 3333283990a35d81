"""Span helpers for use-case code.

``@traced`` wraps async service methods. The tenant of the call and the
size of list results are recorded; queries, chat history and e-mail bodies
are never put on a span.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

P = ParamSpec("P")
R = TypeVar("R")

_tracer = trace.get_tracer("app.zycle")

# Keyword arguments copied onto the span as ``zycle.<name>``.
_RECORDED_KWARGS = ("tenant_id", "limit", "period", "material_id", "loan_id")


def traced(
    span_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run the decorated coroutine inside a span named ``span_name``.

    Exceptions mark the span as failed and propagate unchanged.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with _tracer.start_as_current_span(span_name) as span:
                for key in _RECORDED_KWARGS:
                    if kwargs.get(key) is not None:
                        span.set_attribute(f"zycle.{key}", str(kwargs[key]))
                try:
                    result = await func(*args, **kwargs)
                except Exception as exc:
                    span.record_exception(exc)
                    span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
                    raise
                if isinstance(result, list):
                    span.set_attribute("zycle.result_count", len(result))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span when it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


def add_span_event(name: str, attributes: dict[str, str] | None = None) -> None:
    """Record an event (e.g. one assistant tool call) on the current span."""
    span = trace.get_current_span()
    if span.is_recording():
        span.add_event(name, attributes=attributes or {})
