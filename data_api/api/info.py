"""Health and service info endpoints."""

from fastapi import APIRouter, Depends

from data_api.api.dependencies import get_service_info
from data_api.models import ServiceInfo

router = APIRouter()


@router.get("/healthz")
def health_check():
    """Liveness probe."""
    return {"status": "OK"}


@router.get("/info")
def service_info(info: ServiceInfo = Depends(get_service_info)):
    """Name and instance id of this service."""
    return info.model_dump(by_alias=True)
