from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from order_submission_api.core.domain.exceptions import OrderError, OrderErrorKind
from order_submission_api.infrastructure.configuration import Settings
from order_submission_api.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from order_submission_api.infrastructure.entrypoints.api.orders_router import (
    router as orders_router,
)
from order_submission_api.infrastructure.observability import (
    configure_logging,
    configure_tracing,
    get_logger,
)
from order_submission_api.infrastructure.observability.logging import CorrelationMiddleware
from order_submission_api.infrastructure.resolution import build_order_service

logger = get_logger(__name__)

_STATUS_BY_KIND: dict[OrderErrorKind, int] = {
    OrderErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.ITEM_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.INTEGER_OVERFLOW: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level, settings.log_format, settings.env)
    configure_tracing(settings.app_name, settings.env, settings.tracing_console_export)

    order_service = build_order_service(settings)
    logger.info(
        "Application configured",
        app_name=settings.app_name,
        environment=settings.env,
        catalog_file=str(settings.catalog_file) if settings.catalog_file else None,
    )

    app = FastAPI(title=settings.app_name)
    app.state.order_service = order_service

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        logger.warning(
            "Malformed request body",
            error_type="RequestValidationError",
            error_code=OrderErrorKind.INVALID_REQUEST.value,
            error_details=details,
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": details})

    @app.exception_handler(OrderError)
    async def order_error_handler(request: Request, exc: OrderError):
        logger.warning(
            "Order request rejected",
            error_type=type(exc).__name__,
            error_code=exc.kind.value,
            error_details=exc.context,
        )
        return JSONResponse(status_code=_STATUS_BY_KIND[exc.kind], content={"error": exc.message})

    app.add_middleware(CorrelationMiddleware)
    app.include_router(health_router)
    app.include_router(orders_router)
    app.mount("/metrics", make_asgi_app())

    return app
