import logging
from collections.abc import Callable, Sequence
from uuid import uuid4

from order_submission_api.core.application.ports import OrderStorePort
from order_submission_api.core.application.validation import validate_cart, validate_order_id
from order_submission_api.core.domain.catalog import Catalog
from order_submission_api.core.domain.exceptions import OrderNotFoundError
from order_submission_api.core.domain.order import CartLine, OrderSummary
from order_submission_api.core.domain.pricing import PricingResult, price_cart

logger = logging.getLogger(__name__)


def new_order_id() -> str:
    return str(uuid4())


class OrderService:
    """Validates carts, prices them against the catalog and keeps the results.

    All operations are synchronous and scoped to a single request. Failures
    raise ``OrderError`` subclasses and are never retried.
    """

    def __init__(
        self,
        catalog: Catalog,
        store: OrderStorePort,
        id_factory: Callable[[], str] = new_order_id,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._id_factory = id_factory

    def price(self, cart: Sequence[CartLine]) -> PricingResult:
        """Quote a cart without storing it."""
        validate_cart(cart)
        return price_cart(cart, self._catalog)

    def submit(self, cart: Sequence[CartLine]) -> OrderSummary:
        result = self.price(cart)

        order_id = self._id_factory()
        summary = OrderSummary(order_id=order_id, lines=result.lines, total_cost=result.total_cost)
        self._store.insert(order_id, summary)

        logger.info(
            "[OrderService] Stored order %s: %d line(s), total %d",
            order_id,
            len(summary.lines),
            summary.total_cost,
        )
        return summary

    def get_one(self, order_id: str) -> OrderSummary:
        validate_order_id(order_id)

        summary = self._store.get(order_id)
        if summary is None:
            raise OrderNotFoundError(context={"order_id": order_id})
        return summary

    def get_all(self) -> list[OrderSummary]:
        return self._store.get_all()
