"""Entry point for the Employee Directory API.

Starts uvicorn serving ``employee_directory_api.app.main:app``.  Host,
port and log level come from the same environment variables read by
``Settings`` (``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
from uvicorn import Config, Server

from employee_directory_api.app.core.config import settings


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="employee_directory_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
