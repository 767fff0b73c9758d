from dataclasses import dataclass


@dataclass(frozen=True)
class PricedLine:
    item_name: str
    quantity: int
    cost: int
