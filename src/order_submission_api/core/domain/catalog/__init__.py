from order_submission_api.core.domain.catalog.catalog import Catalog
from order_submission_api.core.domain.catalog.discount_strategy import (
    DiscountRule,
    DiscountStrategy,
    buy_one_get_one_free,
    three_for_two,
)
from order_submission_api.core.domain.catalog.reference_catalog import build_reference_catalog

__all__ = [
    "Catalog",
    "DiscountRule",
    "DiscountStrategy",
    "build_reference_catalog",
    "buy_one_get_one_free",
    "three_for_two",
]
