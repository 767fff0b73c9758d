from order_submission_api.core.domain.exceptions.catalog_configuration_error import (
    CatalogConfigurationError,
)
from order_submission_api.core.domain.exceptions.order_error import (
    IntegerOverflowError,
    InvalidRequestError,
    ItemNotFoundError,
    OrderError,
    OrderErrorKind,
    OrderNotFoundError,
)

__all__ = [
    "CatalogConfigurationError",
    "IntegerOverflowError",
    "InvalidRequestError",
    "ItemNotFoundError",
    "OrderError",
    "OrderErrorKind",
    "OrderNotFoundError",
]
