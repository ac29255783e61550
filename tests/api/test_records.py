"""Tests for record API endpoints."""

from data_api.api import records
from data_api.models import Record
from tests.conftest import create_test_record


def test_create_record(test_client, store):
    """Test PUT /data endpoint."""
    response = test_client.put("/data", json={"ID": "a1", "Message": "hello"})

    assert response.status_code == 201
    assert response.json() == {"ID": "a1", "Message": "hello"}
    assert store.get("a1") == Record(id="a1", message="hello")


def test_create_record_with_post(test_client, store):
    """Test POST /data endpoint."""
    response = test_client.post("/data", json={"ID": "a1", "Message": "hello"})

    assert response.status_code == 201
    assert "a1" in store


def test_create_record_conflict(test_client, store):
    """Test creating a duplicate ID returns 409 and keeps the original."""
    create_test_record(store, "a1", "hello")

    response = test_client.put("/data", json={"ID": "a1", "Message": "world"})

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "ALREADY_EXISTS"
    assert error["key"] == "a1"
    assert store.get("a1").message == "hello"


def test_create_record_malformed(test_client, store):
    """Test an undecodable body returns 400."""
    response = test_client.put(
        "/data", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "MALFORMED_INPUT"
    assert "Please check submission" in error["hint"]
    assert len(store) == 0


def test_create_record_missing_fields(test_client, store):
    """Test empty fields are all reported with 400."""
    response = test_client.put("/data", json={"ID": "", "Message": ""})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "MISSING_FIELD"
    assert error["fields"] == ["ID", "Message"]
    assert len(store) == 0


def test_get_record(test_client, store):
    """Test GET /data/{id} endpoint."""
    create_test_record(store, "a1", "hello")

    response = test_client.get("/data/a1")

    assert response.status_code == 200
    assert response.json() == {"ID": "a1", "Message": "hello"}


def test_get_record_not_found(test_client):
    """Test GET /data/{id} with non-existent ID."""
    response = test_client.get("/data/missing")

    assert response.status_code == 404
    assert "not found" in response.json()["error"]["message"]


def test_list_records_empty(test_client):
    """Test GET /data with no records."""
    response = test_client.get("/data")

    assert response.status_code == 200
    assert response.json() == []


def test_list_records(test_client, store):
    """Test GET /data endpoint."""
    create_test_record(store, "a1", "hello")
    create_test_record(store, "a2", "world")

    response = test_client.get("/data")

    assert response.status_code == 200
    assert response.json() == [
        {"ID": "a1", "Message": "hello"},
        {"ID": "a2", "Message": "world"},
    ]


def test_update_record(test_client, store):
    """Test PATCH /data/{id} returns the previous value."""
    create_test_record(store, "a1", "hello")

    response = test_client.patch("/data/a1", json={"ID": "a1", "Message": "world"})

    assert response.status_code == 200
    assert response.json() == {"ID": "a1", "Message": "hello"}
    assert store.get("a1").message == "world"


def test_update_record_path_id_wins(test_client, store):
    """Test the body ID is ignored in favour of the path."""
    create_test_record(store, "a1", "hello")
    create_test_record(store, "b1", "untouched")

    response = test_client.patch("/data/a1", json={"ID": "b1", "Message": "world"})

    assert response.status_code == 200
    assert store.get("a1").message == "world"
    assert store.get("b1").message == "untouched"


def test_update_record_no_change(test_client, store):
    """Test an identical update returns 409."""
    create_test_record(store, "a1", "hello")

    response = test_client.patch("/data/a1", json={"Message": "hello"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "NO_CHANGE"


def test_update_record_not_found(test_client):
    """Test PATCH /data/{id} with non-existent ID."""
    response = test_client.patch("/data/missing", json={"Message": "hello"})

    assert response.status_code == 404
    assert response.json()["error"]["key"] == "missing"


def test_update_record_missing_message(test_client, store):
    """Test an update without a message returns 400."""
    create_test_record(store, "a1", "hello")

    response = test_client.patch("/data/a1", json={"ID": "a1"})

    assert response.status_code == 400
    assert response.json()["error"]["fields"] == ["Message"]
    assert store.get("a1").message == "hello"


def test_delete_record(test_client, store):
    """Test DELETE /data/{id} endpoint."""
    create_test_record(store, "a1", "hello")

    response = test_client.delete("/data/a1")

    assert response.status_code == 200
    assert response.json() == {"detail": "Data with ID a1 has been deleted."}
    assert "a1" not in store

    response = test_client.delete("/data/a1")
    assert response.status_code == 404


def test_unexpected_error_returns_500(test_client, store, mocker):
    """Test unexpected failures do not leak details."""
    mocker.patch.object(store, "get_all", side_effect=RuntimeError("boom"))

    response = test_client.get("/data")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "boom" not in response.text


def test_rejections_are_logged(test_client, caplog):
    """Test rejected mutations are logged with their key."""
    with caplog.at_level("ERROR", logger="data_api.api.error_handlers"):
        test_client.get("/data/missing")

    record = caplog.records[-1]
    assert record.event == "NOT_FOUND"
    assert record.key == "missing"
    assert record.path == "/data/missing"


def test_record_with_slash_in_id_is_reachable(test_client, store):
    """Test an ID containing a slash can be read, updated and deleted."""
    response = test_client.put("/data", json={"ID": "a/b", "Message": "hello"})
    assert response.status_code == 201

    response = test_client.get("/data/a/b")
    assert response.status_code == 200
    assert response.json() == {"ID": "a/b", "Message": "hello"}

    response = test_client.get("/data/a%2Fb")
    assert response.status_code == 200
    assert response.json()["ID"] == "a/b"

    response = test_client.patch("/data/a%2Fb", json={"Message": "world"})
    assert response.status_code == 200
    assert store.get("a/b").message == "world"

    response = test_client.delete("/data/a/b")
    assert response.status_code == 200
    assert "a/b" not in store


def test_mutations_run_store_calls_in_threadpool(test_client, store, mocker):
    """Test create and update hand the store call to the threadpool."""
    spy = mocker.spy(records, "run_in_threadpool")

    test_client.put("/data", json={"ID": "a1", "Message": "hello"})
    test_client.patch("/data/a1", json={"Message": "world"})

    assert [call.args[0] for call in spy.call_args_list] == [
        store.create,
        store.update,
    ]
    assert store.get("a1").message == "world"
