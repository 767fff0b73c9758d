"""Composition root: builds the catalog, store and service from settings."""

from order_submission_api.core.application.services import OrderService
from order_submission_api.core.domain.catalog import Catalog, build_reference_catalog
from order_submission_api.infrastructure.configuration import CatalogConfigLoader, CatalogSettings, Settings
from order_submission_api.infrastructure.observability import get_logger
from order_submission_api.infrastructure.observability.metrics_service import ORDERS_STORED
from order_submission_api.infrastructure.repositories import InMemoryOrderStore

logger = get_logger(__name__)


def build_catalog(settings: CatalogSettings) -> Catalog:
    if settings.catalog_file is None:
        logger.info("No catalog file configured, using reference catalog")
        return build_reference_catalog()
    return CatalogConfigLoader.load(settings.catalog_file)


def build_order_service(settings: Settings) -> OrderService:
    store = InMemoryOrderStore()
    # The gauge reads the live store size on every scrape.
    ORDERS_STORED.set_function(store.__len__)
    return OrderService(catalog=build_catalog(settings), store=store)
