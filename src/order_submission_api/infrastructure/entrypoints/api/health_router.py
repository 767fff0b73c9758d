from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

router = APIRouter()

_DISTRIBUTION = "order-submission-api"


@router.get("/health")
def health_check():
    try:
        app_version = version(_DISTRIBUTION)
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": _DISTRIBUTION,
        "version": app_version,
    }
