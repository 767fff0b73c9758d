from order_submission_api.core.domain.catalog.catalog import Catalog
from order_submission_api.core.domain.catalog.discount_strategy import DiscountStrategy

REFERENCE_COSTS: dict[str, int] = {
    "Apples": 60,
    "Oranges": 25,
}

REFERENCE_DISCOUNTS: dict[str, DiscountStrategy] = {
    "Apples": DiscountStrategy.BUY_ONE_GET_ONE_FREE,
    "Oranges": DiscountStrategy.THREE_FOR_TWO,
}


def build_reference_catalog() -> Catalog:
    """Catalog used when no catalog file is configured."""
    return Catalog(costs=REFERENCE_COSTS, discounts=REFERENCE_DISCOUNTS)
