import pytest

from order_submission_api.core.domain.catalog import Catalog, DiscountStrategy, buy_one_get_one_free
from order_submission_api.core.domain.exceptions import CatalogConfigurationError


def test_reference_catalog_prices(catalog: Catalog) -> None:
    assert catalog.lookup_cost("Apples") == 60
    assert catalog.lookup_cost("Oranges") == 25
    assert catalog.lookup_cost("Magazine") is None


def test_missing_rule_does_not_mean_missing_item() -> None:
    catalog = Catalog(costs={"Bananas": 10})

    assert catalog.lookup_cost("Bananas") is not None
    assert catalog.lookup_discount_rule("Bananas") is None


def test_strategy_is_resolved_to_rule(catalog: Catalog) -> None:
    assert catalog.lookup_discount_rule("Apples") is buy_one_get_one_free


def test_accepts_plain_callable_rules() -> None:
    catalog = Catalog(costs={"Pears": 40}, discounts={"Pears": lambda cost, quantity: cost})

    assert catalog.lookup_discount_rule("Pears")(40, 3) == 40


def test_tables_are_read_only() -> None:
    source = {"Apples": 60}
    catalog = Catalog(costs=source)
    source["Apples"] = 1

    assert catalog.lookup_cost("Apples") == 60
    with pytest.raises(TypeError):
        catalog.costs["Apples"] = 0  # type: ignore[index]


@pytest.mark.parametrize(
    ("costs", "discounts"),
    [
        ({"": 10}, {}),
        ({"Apples": -1}, {}),
        ({"Apples": 1.5}, {}),
        ({"Apples": True}, {}),
        ({"Apples": 60}, {"Oranges": DiscountStrategy.THREE_FOR_TWO}),
        ({"Apples": 60}, {"Apples": "half_price"}),
    ],
)
def test_rejects_malformed_definitions(costs, discounts) -> None:
    with pytest.raises(CatalogConfigurationError):
        Catalog(costs=costs, discounts=discounts)
