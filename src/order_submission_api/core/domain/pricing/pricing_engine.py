"""Cart pricing: cost resolution, checked accumulation and discounts.

Per line the order is fixed: multiply (checked), add to the running total
(checked), then subtract the item's discount if it has one.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from order_submission_api.core.domain.catalog import Catalog
from order_submission_api.core.domain.exceptions import ItemNotFoundError
from order_submission_api.core.domain.order import CartLine, PricedLine
from order_submission_api.core.domain.pricing.checked_arithmetic import checked_add, checked_mul


@dataclass(frozen=True)
class PricingResult:
    lines: tuple[PricedLine, ...]
    total_cost: int


def resolve_costs(cart: Sequence[CartLine], catalog: Catalog) -> tuple[PricedLine, ...]:
    """Attach unit costs to every line, failing on the first unknown item."""
    priced: list[PricedLine] = []
    for index, line in enumerate(cart):
        cost = catalog.lookup_cost(line.item_name)
        if cost is None:
            raise ItemNotFoundError(context={"item_name": line.item_name, "line_index": index})
        priced.append(PricedLine(item_name=line.item_name, quantity=line.quantity, cost=cost))
    return tuple(priced)


def price_cart(cart: Sequence[CartLine], catalog: Catalog) -> PricingResult:
    lines = resolve_costs(cart, catalog)

    running_total = 0
    for line in lines:
        line_total = checked_mul(line.cost, line.quantity)
        running_total = checked_add(running_total, line_total)

        rule = catalog.lookup_discount_rule(line.item_name)
        if rule is not None:
            running_total -= rule(line.cost, line.quantity)

    return PricingResult(lines=lines, total_cost=running_total)
