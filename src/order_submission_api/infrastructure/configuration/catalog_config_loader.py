from pathlib import Path
from typing import Any

import yaml

from order_submission_api.core.domain.catalog import Catalog, DiscountStrategy
from order_submission_api.core.domain.exceptions import CatalogConfigurationError
from order_submission_api.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


class CatalogConfigLoader:
    """
    Loads a Catalog from a YAML document of the form:

        items:
          Apples: 60
        discounts:
          Apples: buy_one_get_one_free

    ``discounts`` is optional. Every failure surfaces as CatalogConfigurationError.
    """

    @staticmethod
    def load(path: Path) -> Catalog:
        document = CatalogConfigLoader._read_document(path)
        items = CatalogConfigLoader._section(document, "items", required=True)
        discounts = CatalogConfigLoader._section(document, "discounts", required=False)

        catalog = Catalog(
            costs=dict(items),
            discounts={name: CatalogConfigLoader._parse_strategy(name, value) for name, value in discounts.items()},
        )
        logger.info(
            "Catalog loaded",
            catalog_file=str(path),
            item_count=len(catalog.costs),
            discount_count=len(catalog.discounts),
        )
        return catalog

    @staticmethod
    def _read_document(path: Path) -> dict[str, Any]:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogConfigurationError(f"Cannot read catalog file '{path}': {e}") from e

        try:
            document = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise CatalogConfigurationError(f"Invalid YAML in catalog file '{path}': {e}") from e

        if not isinstance(document, dict):
            raise CatalogConfigurationError(f"Catalog file '{path}' must contain a mapping at the top level.")
        return document

    @staticmethod
    def _section(document: dict[str, Any], key: str, *, required: bool) -> dict[Any, Any]:
        section = document.get(key)
        if section is None:
            if required:
                raise CatalogConfigurationError(f"Catalog definition is missing the '{key}' section.")
            return {}
        if not isinstance(section, dict):
            raise CatalogConfigurationError(f"Catalog section '{key}' must be a mapping.")
        return section

    @staticmethod
    def _parse_strategy(item_name: str, value: Any) -> DiscountStrategy:
        try:
            return DiscountStrategy(str(value).strip().lower())
        except ValueError as e:
            known = ", ".join(strategy.value for strategy in DiscountStrategy)
            raise CatalogConfigurationError(
                f"Unknown discount strategy '{value}' for '{item_name}'. Expected one of: {known}."
            ) from e
