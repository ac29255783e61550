"""Validation gate for candidate records."""

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from data_api.core.errors import MalformedInputError, MissingFieldError
from data_api.models import RECORD_FIELDS, Record


class RecordPayload(BaseModel):
    """Wire shape of a submitted record.

    Absent or null fields decode to empty strings so that field validation,
    not decoding, reports them.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    ID: str | None = None
    Message: str | None = None


class ValidationGate:
    """Stateless checks run before a candidate reaches the record store."""

    @staticmethod
    def decode(payload: bytes | str) -> Record:
        """Decode a JSON payload into a candidate record.

        Raises:
            MalformedInputError: If the payload is not a JSON object with
                string-valued ID and Message fields
        """
        try:
            data = RecordPayload.model_validate_json(payload)
        except PydanticValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
                for err in e.errors()
            )
            raise MalformedInputError(reasons) from e

        return Record(id=data.ID or "", message=data.Message or "")

    @staticmethod
    def validate(candidate: Record) -> Record:
        """Check required fields, reporting every empty one.

        Raises:
            MissingFieldError: If any required field is empty
        """
        values = dict(zip(RECORD_FIELDS, (candidate.id, candidate.message)))
        missing = tuple(name for name in RECORD_FIELDS if not values[name])
        if missing:
            raise MissingFieldError(missing)
        return candidate

    @staticmethod
    def parse(payload: bytes | str, record_id: str | None = None) -> Record:
        """Decode and validate a payload.

        Args:
            payload: Raw request body
            record_id: Key taken from the request path; overrides the body ID

        Returns:
            The validated candidate record
        """
        candidate = ValidationGate.decode(payload)
        if record_id is not None:
            candidate = Record(id=record_id, message=candidate.message)
        return ValidationGate.validate(candidate)
