from order_submission_api.core.application.validation.order_request_validator import (
    ORDER_ID_PATTERN,
    validate_cart,
    validate_order_id,
)

__all__ = ["ORDER_ID_PATTERN", "validate_cart", "validate_order_id"]
