"""Domain models."""

from .record import RECORD_FIELDS, Record
from .service_info import ServiceInfo

__all__ = ["RECORD_FIELDS", "Record", "ServiceInfo"]
