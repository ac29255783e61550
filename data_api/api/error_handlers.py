"""Global exception handlers mapping record errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from data_api.core.errors import ErrorCode, RecordError
from data_api.core.observability import log_error

logger = logging.getLogger(__name__)

INCORRECT_INPUT_HINT = (
    'Please check submission: {"ID":"<ID_VALUE>","Message":"<MESSAGE_VALUE>"}'
)

STATUS_BY_CODE = {
    ErrorCode.MALFORMED_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.NO_CHANGE: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError):
        """Translate an expected record failure into its status code."""
        status_code = STATUS_BY_CODE[exc.code]
        details = exc.details()
        log_error(
            logger,
            exc.code.value,
            exc.message,
            data=details.get("reason"),
            key=details.get("key"),
            fields=details.get("fields"),
            method=request.method,
            path=request.url.path,
        )

        content = exc.to_response()
        if status_code == status.HTTP_400_BAD_REQUEST:
            content["error"]["hint"] = INCORRECT_INPUT_HINT
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all that never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"event": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
