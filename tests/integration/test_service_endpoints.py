from pathlib import Path

from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from order_submission_api.infrastructure.configuration import Settings
from order_submission_api.infrastructure.entrypoints.api import create_app


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "order-submission-api"


def test_metrics_expose_order_counters(client: TestClient) -> None:
    client.post("/submit-order", json={"cart": [{"item_name": "Apples", "quantity": 1}]})

    response = client.get("/metrics/")

    assert response.status_code == 200
    assert 'orders_submitted_total{outcome="success"}' in response.text
    assert "order_pricing_duration_seconds" in response.text


def test_orders_stored_gauge_tracks_store_size(client: TestClient) -> None:
    assert REGISTRY.get_sample_value("orders_stored") == 0

    client.post("/submit-order", json={"cart": [{"item_name": "Apples", "quantity": 1}]})
    client.post("/submit-order", json={"cart": [{"item_name": "Magazine", "quantity": 1}]})

    assert REGISTRY.get_sample_value("orders_stored") == 1


def test_app_uses_configured_catalog(tmp_path: Path, settings: Settings) -> None:
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text("items:\n  Milk: 90\ndiscounts:\n  Milk: three_for_two\n", encoding="utf-8")
    client = TestClient(create_app(settings.model_copy(update={"catalog_file": catalog_file})))

    response = client.post("/submit-order", json={"cart": [{"item_name": "Milk", "quantity": 3}]})
    assert response.status_code == 200
    assert response.json()["total_cost"] == 180

    missing = client.post("/submit-order", json={"cart": [{"item_name": "Apples", "quantity": 1}]})
    assert missing.status_code == 400
