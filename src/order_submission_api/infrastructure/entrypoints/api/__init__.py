from .app_factory import create_app
from .health_router import router as health_router
from .orders_router import router as orders_router

__all__ = ["create_app", "health_router", "orders_router"]
