from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from order_submission_api.core.domain.catalog.discount_strategy import (
    DiscountRule,
    DiscountStrategy,
)
from order_submission_api.core.domain.exceptions import CatalogConfigurationError


@dataclass(frozen=True)
class Catalog:
    """Read-only price list plus the discount rule attached to each item.

    Both tables are copied and frozen on construction. A rule may be a
    ``DiscountStrategy`` member or any ``(cost, quantity) -> amount`` callable.
    """

    costs: Mapping[str, int]
    discounts: Mapping[str, DiscountStrategy | DiscountRule] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name, cost in self.costs.items():
            if not isinstance(name, str) or not name:
                raise CatalogConfigurationError(f"Catalog item names must be non-empty strings, got {name!r}.")
            if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
                raise CatalogConfigurationError(
                    f"Unit cost for '{name}' must be a non-negative integer, got {cost!r}."
                )

        resolved: dict[str, DiscountRule] = {}
        for name, rule in self.discounts.items():
            if name not in self.costs:
                raise CatalogConfigurationError(f"Discount declared for unknown item '{name}'.")
            if isinstance(rule, DiscountStrategy):
                resolved[name] = rule.rule
            elif callable(rule):
                resolved[name] = rule
            else:
                raise CatalogConfigurationError(f"Discount for '{name}' is not a valid rule: {rule!r}.")

        object.__setattr__(self, "costs", MappingProxyType(dict(self.costs)))
        object.__setattr__(self, "discounts", MappingProxyType(dict(self.discounts)))
        object.__setattr__(self, "_rules", MappingProxyType(resolved))

    def lookup_cost(self, item_name: str) -> int | None:
        return self.costs.get(item_name)

    def lookup_discount_rule(self, item_name: str) -> DiscountRule | None:
        """Absent rule means no discount; it says nothing about the item existing."""
        return self._rules.get(item_name)
