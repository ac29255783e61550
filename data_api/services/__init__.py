"""Business logic services."""

from .api_client import ApiClientService
from .record_store import RecordStore
from .validation import ValidationGate

__all__ = ["ApiClientService", "RecordStore", "ValidationGate"]
