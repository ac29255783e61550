"""Record API endpoints."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from data_api.api.dependencies import get_store
from data_api.models import Record
from data_api.services import RecordStore, ValidationGate

router = APIRouter()


class RecordResponse(BaseModel):
    """Response model for record data."""

    ID: str
    Message: str

    @classmethod
    def from_record(cls, record: Record) -> "RecordResponse":
        return cls(**record.to_dict())


class DeleteResponse(BaseModel):
    """Response model for a deleted record."""

    detail: str


@router.get("/data", response_model=list[RecordResponse])
def list_records(store: RecordStore = Depends(get_store)):
    """List all records."""
    return [RecordResponse.from_record(record) for record in store.get_all()]


@router.put(
    "/data", response_model=RecordResponse, status_code=status.HTTP_201_CREATED
)
@router.post(
    "/data", response_model=RecordResponse, status_code=status.HTTP_201_CREATED
)
async def create_record(request: Request, store: RecordStore = Depends(get_store)):
    """Create a new record."""
    candidate = ValidationGate.parse(await request.body())
    record = await run_in_threadpool(store.create, candidate)
    return RecordResponse.from_record(record)


@router.get("/data/{record_id:path}", response_model=RecordResponse)
def get_record(record_id: str, store: RecordStore = Depends(get_store)):
    """Get a record by ID."""
    return RecordResponse.from_record(store.get(record_id))


@router.patch("/data/{record_id:path}", response_model=RecordResponse)
async def update_record(
    record_id: str, request: Request, store: RecordStore = Depends(get_store)
):
    """Replace a record's message, returning the previous value.

    The path ID is authoritative; an ID in the body is ignored.
    """
    candidate = ValidationGate.parse(await request.body(), record_id=record_id)
    previous = await run_in_threadpool(store.update, candidate)
    return RecordResponse.from_record(previous)


@router.delete("/data/{record_id:path}", response_model=DeleteResponse)
def delete_record(record_id: str, store: RecordStore = Depends(get_store)):
    """Delete a record by ID."""
    store.delete(record_id)
    return DeleteResponse(detail=f"Data with ID {record_id} has been deleted.")
