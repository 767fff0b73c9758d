from dataclasses import dataclass

from order_submission_api.core.domain.order.priced_line import PricedLine


@dataclass(frozen=True)
class OrderSummary:
    """A priced, identified order. Never mutated once stored."""

    order_id: str
    lines: tuple[PricedLine, ...]
    total_cost: int
