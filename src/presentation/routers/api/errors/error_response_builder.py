"""Error response builder for RFC 9457 Problem Details.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_CONTENT_TYPE = "application/problem+json"

_STATUS_BY_CODE: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Converts application layer errors into standardized RFC 9457 JSON responses
    with appropriate HTTP status codes and structured error information.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Event not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Validation failures list every rule violation in `errors`, in the
        order the validator reported them.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=problem_type_uri(error.code.value),
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=ErrorResponseBuilder._field_errors(error),
            trace_id=trace_id or None,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_CONTENT_TYPE,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _TITLE_BY_CODE.get(code, "Internal Server Error")

    @staticmethod
    def _field_errors(error: ApplicationError) -> list[ErrorDetail] | None:
        if error.validation_errors:
            return [
                ErrorDetail(
                    field=e.field or "unknown",
                    code=e.code.value,
                    message=e.message,
                )
                for e in error.validation_errors
            ]

        # Single field-level domain error (e.g. a wrapped ValidationError)
        field = getattr(error.domain_error, "field", None)
        if error.domain_error is not None and field is not None:
            return [
                ErrorDetail(
                    field=field,
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]
        return None


def problem_type_uri(slug: str) -> str:
    """Build the problem `type` URI for an error slug."""
    return f"{settings.api_base_url}/errors/{slug}"
