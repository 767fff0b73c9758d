from .logger_factory_service import configure_logging, get_logger
from .tracing_setup import configure_tracing, get_tracer

__all__ = [
    "configure_logging",
    "configure_tracing",
    "get_logger",
    "get_tracer",
]
