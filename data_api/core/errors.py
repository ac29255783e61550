"""Core exception classes for the application."""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of record error codes."""

    MALFORMED_INPUT = "MALFORMED_INPUT"
    MISSING_FIELD = "MISSING_FIELD"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    NO_CHANGE = "NO_CHANGE"


class RecordError(Exception):
    """Base class for every expected record store or validation failure."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict:
        """Structured detail identifying what failed."""
        return {}

    def to_response(self) -> dict:
        """Render the error as a response body."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                **self.details(),
            }
        }


class MalformedInputError(RecordError):
    """Raised when a payload cannot be decoded into a record."""

    code = ErrorCode.MALFORMED_INPUT

    def __init__(self, reason: str):
        super().__init__(f"Malformed input: {reason}")
        self.reason = reason

    def details(self) -> dict:
        return {"reason": self.reason}


class MissingFieldError(RecordError):
    """Raised when one or more required fields are empty."""

    code = ErrorCode.MISSING_FIELD

    def __init__(self, fields: tuple[str, ...]):
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")

    def details(self) -> dict:
        return {"fields": list(self.fields)}


class RecordAlreadyExistsError(RecordError):
    """Raised when trying to create a record that already exists."""

    code = ErrorCode.ALREADY_EXISTS

    def __init__(self, key: str):
        super().__init__(f"Record with id {key} already exists")
        self.key = key

    def details(self) -> dict:
        return {"key": self.key}


class NotFoundError(RecordError):
    """Raised when a record is not found."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, key: str):
        super().__init__(f"Record with id {key} not found")
        self.key = key

    def details(self) -> dict:
        return {"key": self.key}


class NoChangeError(RecordError):
    """Raised when an update carries the value already stored."""

    code = ErrorCode.NO_CHANGE

    def __init__(self, key: str):
        super().__init__(f"Record with id {key} is unchanged")
        self.key = key

    def details(self) -> dict:
        return {"key": self.key}
