"""Global exception handlers for FastAPI application.

This module provides exception handlers that catch unhandled exceptions
and convert them to RFC 9457 Problem Details responses.

Handlers:
    http_exception_handler: Converts HTTPException to RFC 9457 format
    validation_exception_handler: Converts RequestValidationError to a 400 problem
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.errors.error_response_builder import (
    PROBLEM_CONTENT_TYPE,
    problem_type_uri,
)
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


# HTTP status code to (title, slug) mapping for RFC 9457
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for RFC 9457 type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _problem_response(
    problem: ProblemDetails,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
        media_type=PROBLEM_CONTENT_TYPE,
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Covers unknown routes (404) and wrong methods (405) raised by Starlette
    as well as HTTPException raised by route code.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler or dependency.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails.
    """
    assert isinstance(exc, StarletteHTTPException)

    trace_id = getattr(request.state, "trace_id", None)

    problem = ProblemDetails(
        type=problem_type_uri(_get_error_slug(exc.status_code)),
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return _problem_response(problem, headers=getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response.

    Malformed bodies and parameters (unparseable JSON, a non-UUID id, a
    non-boolean includeHistory) are bad requests.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails including field errors.

    Example:
        >>> # GET /api/events/not-a-uuid
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/bad-request",
        >>> #   "title": "Bad Request",
        >>> #   "status": 400,
        >>> #   "detail": "Request validation failed. Check 'errors' for details.",
        >>> #   "instance": "/api/events/not-a-uuid",
        >>> #   "errors": [
        >>> #     {"field": "event_id", "code": "uuid_parsing", "message": "..."}
        >>> #   ],
        >>> #   "trace_id": "..."
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    trace_id = getattr(request.state, "trace_id", None)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "price"] -> "price", ["path", "event_id"] -> "event_id"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "path", "query")]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=problem_type_uri("bad-request"),
        title="Bad Request",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=trace_id,
    )

    return _problem_response(problem)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and answers with a 500 problem carrying only the
    trace ID, never the exception text.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with RFC 9457 ProblemDetails (500 Internal Server Error)
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=problem_type_uri("internal-server-error"),
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return _problem_response(problem)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # Starlette's base class also covers routing 404/405
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
