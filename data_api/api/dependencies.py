"""Request dependencies resolving per-application state."""

from fastapi import Request

from data_api.models import ServiceInfo
from data_api.services import RecordStore


def get_store(request: Request) -> RecordStore:
    """Record store owned by the running application."""
    return request.app.state.store


def get_service_info(request: Request) -> ServiceInfo:
    """Identity of the running service."""
    return request.app.state.service_info
