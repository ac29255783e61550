"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from data_api.main import create_app
from data_api.models import Record, ServiceInfo
from data_api.services import RecordStore

TEST_INSTANCE_ID = "12345678-1234-5678-1234-567812345678"


def create_test_record(
    store: RecordStore,
    record_id: str = "a1",
    message: str = "hello",
) -> Record:
    """Helper function to store a test record with default values."""
    return store.create(Record(id=record_id, message=message))


@pytest.fixture(scope="function")
def store():
    """Fresh, empty record store."""
    return RecordStore()


@pytest.fixture(scope="function")
def service_info():
    """Service identity with a fixed instance id."""
    return ServiceInfo(name="test-service", instance_id=TEST_INSTANCE_ID)


@pytest.fixture(scope="function")
def test_client(store, service_info):
    """Create a test client serving the store fixture."""
    app = create_app(store=store, service_info=service_info)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
