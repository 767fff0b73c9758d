from dataclasses import dataclass


@dataclass(frozen=True)
class CartLine:
    """One requested item. Checked by the order service, not on construction."""

    item_name: str
    quantity: int
