from pydantic import BaseModel, Field, StrictInt, StrictStr

# Request fields default to their zero values so that missing keys reach the
# core validator and come back as InvalidRequest.


class CartLineDTO(BaseModel):
    item_name: StrictStr = ""
    quantity: StrictInt = 0


class SubmitOrderRequestDTO(BaseModel):
    cart: list[CartLineDTO] = Field(default_factory=list)


class GetOrderRequestDTO(BaseModel):
    order_id: StrictStr = ""


class PricedLineDTO(BaseModel):
    item_name: str
    quantity: int
    cost: int


class OrderSummaryDTO(BaseModel):
    order_id: str
    summary: list[PricedLineDTO]
    total_cost: int


class PriceQuoteDTO(BaseModel):
    summary: list[PricedLineDTO]
    total_cost: int


class AllOrdersDTO(BaseModel):
    # Left as None (and excluded from the response) when nothing is stored.
    orders: list[OrderSummaryDTO] | None = None


class ErrorResponseDTO(BaseModel):
    error: str
