"""Structlog processor for the order service log schema.

Transforms a flat event_dict into nested blocks (processing, error, order,
context). All field extraction uses dict.pop(key, default) so missing keys
are never an error; anything left over lands under "extra".
"""

from __future__ import annotations

import os
from typing import Any

from opentelemetry import trace


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "order-submission-api"),
        "environment": os.environ.get("APP_ENV", "local"),
        "trace_id": event_dict.pop("trace_id", None),
        "span_id": event_dict.pop("span_id", None),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "http_status": event_dict.pop("processing_http_status", None),
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_order(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    order_id = event_dict.pop("order_id", None)
    line_count = event_dict.pop("order_line_count", None)
    total_cost = event_dict.pop("order_total_cost", None)
    if order_id is None and line_count is None and total_cost is None:
        return None
    return {
        "order_id": order_id,
        "line_count": line_count,
        "total_cost": total_cost,
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": method,
    }


def _inject_otel_ids(event_dict: dict[str, Any]) -> None:
    """Overwrite trace_id and span_id from the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")


def order_log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    _inject_otel_ids(event_dict)
    result = _build_root_fields(event_dict)

    for key, builder in (
        ("processing", _build_processing),
        ("error", _build_error),
        ("order", _build_order),
        ("context", _build_context),
    ):
        block = builder(event_dict)
        if block is not None:
            result[key] = block

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
