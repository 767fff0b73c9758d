from order_submission_api.core.domain.order.cart_line import CartLine
from order_submission_api.core.domain.order.order_summary import OrderSummary
from order_submission_api.core.domain.order.priced_line import PricedLine

__all__ = ["CartLine", "OrderSummary", "PricedLine"]
