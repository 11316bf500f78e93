"""Production server startup script for the social service.

Launches the Django WSGI application under Gunicorn for container
deployments. Bind address and worker counts come from the environment.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_gunicorn_argv() -> list[str]:
    """Assemble the Gunicorn command line from environment variables.

    Environment Variables:
    - PORT: Port to bind on 0.0.0.0 (default: 8000)
    - GUNICORN_WORKERS: Worker processes (default: 4)
    - GUNICORN_THREADS: Threads per worker (default: 2)
    - GUNICORN_TIMEOUT: Worker timeout in seconds (default: 60)

    Returns:
        Argument vector suitable for ``sys.argv``.
    """
    port = os.getenv("PORT", "8000")
    return [
        "gunicorn",
        "social_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{port}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the social service using Gunicorn."""
    sys.argv = build_gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
