from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

from order_submission_api.core.domain.order import OrderSummary, PricedLine
from order_submission_api.infrastructure.repositories import InMemoryOrderStore


def _summary(order_id: str, total: int = 60) -> OrderSummary:
    return OrderSummary(order_id=order_id, lines=(PricedLine("Apples", 1, 60),), total_cost=total)


def test_insert_and_get(store: InMemoryOrderStore) -> None:
    summary = _summary("order-1")
    store.insert("order-1", summary)

    assert store.get("order-1") is summary


def test_get_missing_returns_none(store: InMemoryOrderStore) -> None:
    assert store.get("missing") is None


def test_insert_overwrites(store: InMemoryOrderStore) -> None:
    store.insert("order-1", _summary("order-1", total=60))
    store.insert("order-1", _summary("order-1", total=120))

    assert store.get("order-1").total_cost == 120
    assert len(store) == 1


def test_get_all_empty(store: InMemoryOrderStore) -> None:
    assert store.get_all() == []


def test_get_all_returns_a_copy(store: InMemoryOrderStore) -> None:
    store.insert("order-1", _summary("order-1"))

    snapshot = store.get_all()
    snapshot.clear()

    assert len(store.get_all()) == 1


def test_concurrent_inserts_are_all_kept(store: InMemoryOrderStore) -> None:
    ids = [str(uuid4()) for _ in range(500)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda order_id: store.insert(order_id, _summary(order_id)), ids))

    assert len(store) == 500
    assert {summary.order_id for summary in store.get_all()} == set(ids)
