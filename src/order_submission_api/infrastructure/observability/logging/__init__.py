from order_submission_api.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from order_submission_api.infrastructure.observability.logging.order_log_schema_processor import (
    order_log_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "order_log_schema_processor",
]
