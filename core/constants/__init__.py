"""Constants used throughout the social service."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Follow suggestions
DEFAULT_SUGGESTION_LIMIT = 10
SUGGESTION_FRONTIER_LIMIT = 1000  # followees of the requester considered
SUGGESTION_BRANCH_LIMIT = 100  # followees read per frontier member

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SUGGESTION_LIMIT",
    "MAX_PAGE_SIZE",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SLOW_REQUEST_THRESHOLD",
    "SUGGESTION_BRANCH_LIMIT",
    "SUGGESTION_FRONTIER_LIMIT",
]
