"""Built-in per-item discount strategies.

A discount rule is a pure ``(unit_cost, quantity) -> amount`` function. The
amount is never negative and never exceeds ``unit_cost * quantity``.
"""

from collections.abc import Callable, Mapping
from enum import StrEnum
from types import MappingProxyType

DiscountRule = Callable[[int, int], int]


def buy_one_get_one_free(cost: int, quantity: int) -> int:
    if quantity == 1:
        return 0
    if quantity % 2 == 0:
        return cost * (quantity // 2)
    return cost * ((quantity - 1) // 2)


def three_for_two(cost: int, quantity: int) -> int:
    """Every third unit is free."""
    if quantity < 3:
        return 0
    remainder = quantity % 3
    return cost * ((quantity - remainder) // 3)


class DiscountStrategy(StrEnum):
    BUY_ONE_GET_ONE_FREE = "buy_one_get_one_free"
    THREE_FOR_TWO = "three_for_two"

    @property
    def rule(self) -> DiscountRule:
        return _RULES[self]


_RULES: Mapping[DiscountStrategy, DiscountRule] = MappingProxyType(
    {
        DiscountStrategy.BUY_ONE_GET_ONE_FREE: buy_one_get_one_free,
        DiscountStrategy.THREE_FOR_TWO: three_for_two,
    }
)
