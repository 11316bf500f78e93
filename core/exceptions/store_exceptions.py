"""Infrastructure failures raised by edge store implementations."""


class EdgeStoreError(Exception):
    """Base exception for edge store failures."""

    def __init__(self, message: str, operation: str | None = None):
        """Initialize edge store error.

        Args:
            message: Error message
            operation: Name of the store operation that failed
        """
        self.operation = operation
        super().__init__(message)


class ConstraintViolationError(EdgeStoreError):
    """An insert violated the uniqueness or self-edge constraint."""

    def __init__(self, follower_id: str, followee_id: str):
        """Initialize constraint violation error.

        Args:
            follower_id: Follower of the rejected edge
            followee_id: Followee of the rejected edge
        """
        self.follower_id = follower_id
        self.followee_id = followee_id
        super().__init__(
            message=f"Edge {follower_id} -> {followee_id} violates a follows constraint",
            operation="insert",
        )


class StoreUnavailableError(EdgeStoreError):
    """The backing database could not serve the request."""

    def __init__(self, operation: str, message: str | None = None):
        """Initialize store unavailable error.

        Args:
            operation: Name of the store operation that failed
            message: Optional custom error message
        """
        super().__init__(
            message=message or f"Follow store unavailable during {operation}",
            operation=operation,
        )
