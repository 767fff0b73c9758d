import pytest
from fastapi.testclient import TestClient

from order_submission_api.core.application.services import OrderService
from order_submission_api.core.domain.catalog import Catalog, build_reference_catalog
from order_submission_api.core.domain.order import CartLine
from order_submission_api.infrastructure.configuration import Settings
from order_submission_api.infrastructure.entrypoints.api import create_app
from order_submission_api.infrastructure.repositories import InMemoryOrderStore


@pytest.fixture
def catalog() -> Catalog:
    return build_reference_catalog()


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def service(catalog: Catalog, store: InMemoryOrderStore) -> OrderService:
    return OrderService(catalog=catalog, store=store)


@pytest.fixture
def good_cart() -> list[CartLine]:
    return [CartLine("Apples", 2), CartLine("Oranges", 3)]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="TestOrders",
        env="test",
        log_level="INFO",
        log_format="json",
        catalog_file=None,
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
