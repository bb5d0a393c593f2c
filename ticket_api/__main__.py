"""Run the Ticket API with uvicorn: ``python -m ticket_api``."""

import logging

import uvicorn

from ticket_api.core.config import get_settings
from ticket_api.core.logging import configure_logging

logger = logging.getLogger("ticket_api")

ENDPOINTS = (
    ("GET", "/health", "Health check"),
    ("POST", "/tickets", "Create a new ticket"),
    ("GET", "/tickets", "List all tickets"),
    ("GET", "/tickets/{id}", "Get a specific ticket"),
    ("PATCH", "/tickets/{id}", "Update a specific ticket"),
    ("GET", "/metrics", "Prometheus metrics"),
)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Server starting on http://%s:%s", settings.host, settings.port)
    for method, path, summary in ENDPOINTS:
        logger.info("  %-6s %-16s %s", method, path, summary)
    uvicorn.run("ticket_api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
