from collections.abc import Iterable, Sequence

from order_submission_api.core.domain.order import CartLine, OrderSummary, PricedLine
from order_submission_api.core.domain.pricing import PricingResult
from order_submission_api.infrastructure.entrypoints.api.dtos import (
    AllOrdersDTO,
    OrderSummaryDTO,
    PricedLineDTO,
    PriceQuoteDTO,
    SubmitOrderRequestDTO,
)


class OrderPayloadMapper:
    """Translates between wire DTOs and core domain objects."""

    @staticmethod
    def to_cart(payload: SubmitOrderRequestDTO) -> list[CartLine]:
        return [CartLine(item_name=line.item_name, quantity=line.quantity) for line in payload.cart]

    @staticmethod
    def to_summary_dto(summary: OrderSummary) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            order_id=summary.order_id,
            summary=OrderPayloadMapper._to_line_dtos(summary.lines),
            total_cost=summary.total_cost,
        )

    @staticmethod
    def to_quote_dto(result: PricingResult) -> PriceQuoteDTO:
        return PriceQuoteDTO(
            summary=OrderPayloadMapper._to_line_dtos(result.lines),
            total_cost=result.total_cost,
        )

    @staticmethod
    def to_all_orders_dto(summaries: Sequence[OrderSummary]) -> AllOrdersDTO:
        if not summaries:
            return AllOrdersDTO()
        return AllOrdersDTO(orders=[OrderPayloadMapper.to_summary_dto(s) for s in summaries])

    @staticmethod
    def _to_line_dtos(lines: Iterable[PricedLine]) -> list[PricedLineDTO]:
        return [PricedLineDTO(item_name=line.item_name, quantity=line.quantity, cost=line.cost) for line in lines]
