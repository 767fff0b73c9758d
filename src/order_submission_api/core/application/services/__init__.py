from order_submission_api.core.application.services.order_service import (
    OrderService,
    new_order_id,
)

__all__ = ["OrderService", "new_order_id"]
