"""Input checks run before any pricing happens."""

import re
from collections.abc import Sequence
from typing import Final

from order_submission_api.core.domain.exceptions import InvalidRequestError
from order_submission_api.core.domain.order import CartLine
from order_submission_api.core.domain.pricing import INT64_MAX

# Canonical lowercase UUIDv4 shape.
ORDER_ID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def validate_cart(cart: Sequence[CartLine]) -> None:
    if not cart:
        raise InvalidRequestError(context={"reason": "empty cart"})

    for index, line in enumerate(cart):
        if not isinstance(line.item_name, str) or not line.item_name:
            raise InvalidRequestError(context={"reason": "empty item name", "line_index": index})
        _validate_quantity(line.quantity, index)


def _validate_quantity(quantity: object, index: int) -> None:
    # The upper bound matches the declared integer range; overflow itself is
    # detected while pricing.
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidRequestError(context={"reason": "quantity is not an integer", "line_index": index})
    if not 1 <= quantity <= INT64_MAX:
        raise InvalidRequestError(
            context={"reason": "quantity out of range", "line_index": index, "quantity": quantity}
        )


def validate_order_id(order_id: object) -> str:
    if not isinstance(order_id, str) or not ORDER_ID_PATTERN.fullmatch(order_id):
        raise InvalidRequestError(context={"reason": "malformed order id"})
    return order_id
