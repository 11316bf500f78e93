"""Request ID middleware for distributed tracing."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import REQUEST_ID_HEADER
from core.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Tag every request with an ID that follows it through the logs.

    An incoming ``X-Request-ID`` header is reused so that callers can
    correlate their own logs with ours; otherwise a UUID4 is generated. The
    ID is echoed on the response and bound to the current thread for the
    duration of the request only.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Bind the request ID, run the request and echo the ID back.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with the request ID header added.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            # Worker threads are reused across requests
            clear_request_id()
