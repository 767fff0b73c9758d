from order_submission_api.core.domain.pricing.checked_arithmetic import (
    INT64_MAX,
    INT64_MIN,
    checked_add,
    checked_mul,
)
from order_submission_api.core.domain.pricing.pricing_engine import (
    PricingResult,
    price_cart,
    resolve_costs,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "PricingResult",
    "checked_add",
    "checked_mul",
    "price_cart",
    "resolve_costs",
]
