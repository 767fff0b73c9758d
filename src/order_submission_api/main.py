import uvicorn

from order_submission_api.infrastructure.configuration import Settings
from order_submission_api.infrastructure.entrypoints.api import create_app


def dev():
    """Run the development server with auto-reload."""
    settings = Settings()
    uvicorn.run(
        "order_submission_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def serve():
    """Run the server; uvicorn handles SIGINT/SIGTERM with a graceful shutdown."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
