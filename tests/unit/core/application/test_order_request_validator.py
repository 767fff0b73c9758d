from uuid import uuid4

import pytest

from order_submission_api.core.application.validation import validate_cart, validate_order_id
from order_submission_api.core.domain.exceptions import InvalidRequestError
from order_submission_api.core.domain.order import CartLine
from order_submission_api.core.domain.pricing import INT64_MAX


def test_accepts_valid_cart(good_cart: list[CartLine]) -> None:
    validate_cart(good_cart)


def test_accepts_quantity_at_integer_max() -> None:
    validate_cart([CartLine("Apples", INT64_MAX)])


@pytest.mark.parametrize(
    "cart",
    [
        [],
        [CartLine("Apples", 1), CartLine("", 27)],
        [CartLine("Apples", -2), CartLine("Apples", 4)],
        [CartLine("Apples", 0)],
        [CartLine("Apples", INT64_MAX + 1)],
        [CartLine("Apples", True)],
        [CartLine("Apples", 2.0)],  # type: ignore[arg-type]
    ],
    ids=["empty", "empty-name", "negative", "zero", "above-max", "bool", "float"],
)
def test_rejects_invalid_carts(cart: list[CartLine]) -> None:
    with pytest.raises(InvalidRequestError):
        validate_cart(cart)


def test_reports_offending_line() -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        validate_cart([CartLine("Apples", 1), CartLine("Oranges", 0)])

    assert exc_info.value.context["line_index"] == 1


def test_accepts_generated_order_ids() -> None:
    order_id = str(uuid4())

    assert validate_order_id(order_id) == order_id


@pytest.mark.parametrize(
    "order_id",
    [
        "",
        "not-a-uuid",
        "6ba7b810-9dad-11d1-80b4-00c04fd430c8",  # version 1
        "F47AC10B-58CC-4372-A567-0E02B2C3D479",  # uppercase
        "f47ac10b58cc4372a5670e02b2c3d479",
        None,
    ],
)
def test_rejects_malformed_order_ids(order_id) -> None:
    with pytest.raises(InvalidRequestError):
        validate_order_id(order_id)
