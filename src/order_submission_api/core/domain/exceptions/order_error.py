"""Order domain exception hierarchy.

Every core operation raises from this tree, so callers map failures to
responses by ``kind`` instead of matching on message strings. Call-site
details (missing item, offending line) travel in ``context``.
"""

from enum import StrEnum
from typing import Any, ClassVar


class OrderErrorKind(StrEnum):
    INVALID_REQUEST = "INVALID_REQUEST"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INTEGER_OVERFLOW = "INTEGER_OVERFLOW"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"


class OrderError(Exception):
    """Base exception for all order-processing failures."""

    kind: ClassVar[OrderErrorKind]
    default_message: ClassVar[str] = "order processing failed"

    def __init__(self, message: str | None = None, *, context: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.context: dict[str, Any] = context or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, context={self.context!r})"


class InvalidRequestError(OrderError):
    """Malformed input: empty cart, empty item name, bad quantity or order id."""

    kind = OrderErrorKind.INVALID_REQUEST
    default_message = "invalid submitted request"


class ItemNotFoundError(OrderError):
    kind = OrderErrorKind.ITEM_NOT_FOUND
    default_message = "one or more items in the request does not exist"


class IntegerOverflowError(OrderError):
    kind = OrderErrorKind.INTEGER_OVERFLOW
    default_message = "unable to process order request, item total too large"


class OrderNotFoundError(OrderError):
    kind = OrderErrorKind.ORDER_NOT_FOUND
    default_message = "order not found"
