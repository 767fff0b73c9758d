import threading

from order_submission_api.core.application.ports import OrderStorePort
from order_submission_api.core.domain.order import OrderSummary


class InMemoryOrderStore(OrderStorePort):
    """Process-local order store. Contents are lost on shutdown."""

    def __init__(self) -> None:
        self._orders: dict[str, OrderSummary] = {}
        self._lock = threading.Lock()

    def insert(self, order_id: str, summary: OrderSummary) -> None:
        with self._lock:
            self._orders[order_id] = summary

    def get(self, order_id: str) -> OrderSummary | None:
        with self._lock:
            return self._orders.get(order_id)

    def get_all(self) -> list[OrderSummary]:
        with self._lock:
            return list(self._orders.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
