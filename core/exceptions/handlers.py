"""Global exception handlers for the social service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.follow_exceptions import FollowError, FollowErrorCode
from core.exceptions.store_exceptions import (
    ConstraintViolationError,
    StoreUnavailableError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

# HTTP status for each unsuccessful follow result / follow exception
ERROR_STATUS_CODES: dict[FollowErrorCode, int] = {
    FollowErrorCode.SELF_FOLLOW: status.HTTP_400_BAD_REQUEST,
    FollowErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FollowErrorCode.NOT_FOLLOWING: status.HTTP_404_NOT_FOUND,
    FollowErrorCode.ALREADY_FOLLOWING: status.HTTP_409_CONFLICT,
    FollowErrorCode.CONSTRAINT_VIOLATION: status.HTTP_409_CONFLICT,
    FollowErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for_error(code: FollowErrorCode | str | None) -> int:
    """Map a follow error code to an HTTP status, defaulting to 500."""
    if code is None:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return ERROR_STATUS_CODES.get(
        FollowErrorCode(code), status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Handles DRF, Django and follow subsystem exceptions, providing:
    - Standard response format for clients: {status, message, request_id, timestamp}
    - Detailed logging for troubleshooting: error type, path, stack trace, request info

    Follow business errors normally arrive as unsuccessful service results;
    the cases here cover errors that escape when fail-soft mode is disabled.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, FollowError):
            status_code = status_for_error(exc.code)
            message = str(exc)
        elif isinstance(exc, ConstraintViolationError):
            status_code = status.HTTP_409_CONFLICT
            message = "The follow relationship conflicts with an existing one."
        elif isinstance(exc, StoreUnavailableError):
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            message = "The follow store is temporarily unavailable."
        elif isinstance(exc, Http404):
            status_code = status.HTTP_404_NOT_FOUND
            message = "The requested resource was not found."
        elif isinstance(exc, PermissionDenied):
            status_code = status.HTTP_403_FORBIDDEN
            message = "You do not have permission to perform this action."
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            message = "An internal server error occurred."

        response = Response(
            _create_error_response(status_code, message, request_id),
            status=status_code,
        )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body."""
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response,
) -> None:
    """Log exception details; 4xx as warnings, everything else as errors.

    In DEBUG mode the stack trace and request details are appended.
    """
    if 400 <= response.status_code < 500 or (
        isinstance(exc, APIException) and exc.status_code < 500
    ):
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    request_path = getattr(request, "path", "unknown")
    request_method = getattr(request, "method", "unknown")

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {response.status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"
        if request is not None:
            log_message += f"\nRequest details: {_get_request_details(request)}"

    logger.log(log_level, log_message)


def _get_request_details(request: Any) -> str:
    """Extract method, path, client address and query params for logging."""
    details = {
        "method": request.method,
        "path": request.path,
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }
    if request.GET:
        details["query_params"] = dict(request.GET)
    return str(details)
