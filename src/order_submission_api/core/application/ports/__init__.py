from order_submission_api.core.application.ports.order_store_port import OrderStorePort

__all__ = ["OrderStorePort"]
