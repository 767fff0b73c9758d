from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Request, status

from order_submission_api.core.application.services import OrderService
from order_submission_api.core.domain.exceptions import OrderError
from order_submission_api.infrastructure.entrypoints.api.dtos import (
    AllOrdersDTO,
    ErrorResponseDTO,
    GetOrderRequestDTO,
    OrderSummaryDTO,
    PriceQuoteDTO,
    SubmitOrderRequestDTO,
)
from order_submission_api.infrastructure.entrypoints.api.mappers import OrderPayloadMapper
from order_submission_api.infrastructure.observability import get_logger, get_tracer
from order_submission_api.infrastructure.observability.metrics_service import (
    ORDER_PRICING_DURATION_SECONDS,
    ORDERS_SUBMITTED_TOTAL,
)

logger = get_logger(__name__)
router = APIRouter(tags=["orders"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseDTO}}


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


@contextmanager
def _observe_pricing(operation: str) -> Iterator[None]:
    """Wrap a pricing call in a span and the duration histogram."""
    with get_tracer().start_as_current_span(f"order.{operation}"):
        with ORDER_PRICING_DURATION_SECONDS.labels(operation=operation).time():
            yield


@router.post("/submit-order", response_model=OrderSummaryDTO, responses=_BAD_REQUEST)
def submit_order(
    payload: SubmitOrderRequestDTO,
    service: OrderService = Depends(get_order_service),
) -> OrderSummaryDTO:
    cart = OrderPayloadMapper.to_cart(payload)
    try:
        with _observe_pricing("submit"):
            summary = service.submit(cart)
    except OrderError as exc:
        ORDERS_SUBMITTED_TOTAL.labels(outcome=exc.kind.value.lower()).inc()
        raise

    ORDERS_SUBMITTED_TOTAL.labels(outcome="success").inc()
    logger.info(
        "Order submitted",
        order_id=summary.order_id,
        order_line_count=len(summary.lines),
        order_total_cost=summary.total_cost,
    )
    return OrderPayloadMapper.to_summary_dto(summary)


@router.post("/price-cart", response_model=PriceQuoteDTO, responses=_BAD_REQUEST)
def price_cart(
    payload: SubmitOrderRequestDTO,
    service: OrderService = Depends(get_order_service),
) -> PriceQuoteDTO:
    with _observe_pricing("price"):
        result = service.price(OrderPayloadMapper.to_cart(payload))
    return OrderPayloadMapper.to_quote_dto(result)


@router.post(
    "/get-order",
    response_model=OrderSummaryDTO,
    responses={**_BAD_REQUEST, status.HTTP_404_NOT_FOUND: {"model": ErrorResponseDTO}},
)
def get_order(
    payload: GetOrderRequestDTO,
    service: OrderService = Depends(get_order_service),
) -> OrderSummaryDTO:
    return OrderPayloadMapper.to_summary_dto(service.get_one(payload.order_id))


@router.get("/get-all-orders", response_model=AllOrdersDTO, response_model_exclude_none=True)
def get_all_orders(service: OrderService = Depends(get_order_service)) -> AllOrdersDTO:
    return OrderPayloadMapper.to_all_orders_dto(service.get_all())
