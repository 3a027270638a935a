import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from nuggets.errors import AuthenticationError, NotFoundError, StorageError, UpstreamError, ValidationError

logger = structlog.get_logger(__name__)


def create_json_error_response(
    status_code: int, message: str, error_type: str | None = None, details: str | None = None
) -> JSONResponse:
    """Create failure envelope with optional type for machine parsing."""
    content: dict[str, object] = {"ok": False, "error": message}
    if error_type:
        content["type"] = error_type
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    details = None
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
    elif isinstance(exc, UpstreamError):
        status_code = exc.status_code
        error_type = "upstream_error"
        details = exc.details
    else:
        # Default for any other UserError subclass
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type, details=details)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Malformed request bodies become a validation failure envelope."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    fields = sorted({str(error["loc"][-1]) for error in errors if error.get("loc")})
    message = f"Invalid request: {', '.join(fields)}" if fields else "Invalid request"
    return create_json_error_response(status_code=400, message=message, error_type="validation_error")


async def storage_error_handler(_: Request, exc: Exception) -> Response:
    """Storage failures abort only the current request."""
    return create_json_error_response(status_code=500, message=str(exc), error_type="storage_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
