"""Run independent read-only calls on a small thread pool."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from django.db import connections


def _closing_connections(func: Callable[[], Any]) -> Callable[[], Any]:
    """Wrap ``func`` so the worker thread releases its database connections."""

    def run() -> Any:
        try:
            return func()
        finally:
            connections.close_all()

    return run


def run_concurrently(*calls: Callable[[], Any]) -> list[Any]:
    """Execute zero-argument callables in parallel and return results in order.

    The first exception raised by any call is re-raised after all calls
    finish. Django opens one connection per thread, so each worker closes
    its own connections when done.

    Args:
        *calls: Independent, read-only callables

    Returns:
        Results in the same order as ``calls``
    """
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=len(calls)) as executor:
        futures = [executor.submit(_closing_connections(call)) for call in calls]
    return [future.result() for future in futures]
