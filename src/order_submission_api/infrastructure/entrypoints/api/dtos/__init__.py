from .order_dtos import (
    AllOrdersDTO,
    CartLineDTO,
    ErrorResponseDTO,
    GetOrderRequestDTO,
    OrderSummaryDTO,
    PricedLineDTO,
    PriceQuoteDTO,
    SubmitOrderRequestDTO,
)

__all__ = [
    "AllOrdersDTO",
    "CartLineDTO",
    "ErrorResponseDTO",
    "GetOrderRequestDTO",
    "OrderSummaryDTO",
    "PriceQuoteDTO",
    "PricedLineDTO",
    "SubmitOrderRequestDTO",
]
