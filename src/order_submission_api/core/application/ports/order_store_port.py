from abc import ABC, abstractmethod

from order_submission_api.core.domain.order import OrderSummary


class OrderStorePort(ABC):
    """Keyed storage for completed orders.

    Implementations must be safe to call from concurrent request handlers.
    """

    @abstractmethod
    def insert(self, order_id: str, summary: OrderSummary) -> None:
        """Stores ``summary`` under ``order_id``, replacing any previous entry."""

    @abstractmethod
    def get(self, order_id: str) -> OrderSummary | None:
        pass

    @abstractmethod
    def get_all(self) -> list[OrderSummary]:
        """Returns every stored order. Ordering is not guaranteed."""
