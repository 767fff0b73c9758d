"""OpenTelemetry tracing configuration.

Provides:
- configure_tracing(): one-shot TracerProvider setup
- get_tracer(): returns a named Tracer instance
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

_CONFIGURED = False

TRACER_NAME = "order-submission-api"


def configure_tracing(service_name: str, environment: str, console_export: bool = False) -> None:
    """One-shot OTel TracerProvider setup. Safe to call multiple times."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    resource = Resource.create(
        {
            "service.name": service_name,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource)
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def get_tracer(name: str = TRACER_NAME) -> trace.Tracer:
    return trace.get_tracer(name)
