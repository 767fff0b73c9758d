"""Prometheus metrics declarations for the order service.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never order IDs or item names.
"""

from prometheus_client import Counter, Gauge, Histogram

ORDERS_SUBMITTED_TOTAL = Counter(
    "orders_submitted_total",
    "Order submissions by outcome",
    ["outcome"],
)

ORDER_PRICING_DURATION_SECONDS = Histogram(
    "order_pricing_duration_seconds",
    "Time spent validating and pricing a cart",
    ["operation"],
)

ORDERS_STORED = Gauge(
    "orders_stored",
    "Orders currently held in the order store",
)
