"""Process time middleware for performance monitoring."""

import time
from collections.abc import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = structlog.get_logger(__name__)


class ProcessTimeMiddleware:
    """Middleware to track request processing time.

    Adds an ``X-Process-Time`` header (seconds) to every response and logs a
    warning for requests slower than ``SLOW_REQUEST_THRESHOLD``. Suggestion
    traversals over large follow graphs are the usual suspects.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and track its duration.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with process time header added.
        """
        start_time = time.perf_counter()
        response = self.get_response(request)
        duration = time.perf_counter() - start_time

        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.path,
                status_code=response.status_code,
                duration_seconds=round(duration, 3),
                threshold_seconds=SLOW_REQUEST_THRESHOLD,
            )

        return response
