from .container import build_catalog, build_order_service

__all__ = ["build_catalog", "build_order_service"]
