"""Entry point for the Blood Bank API server.

Starts the FastAPI application with Uvicorn on the host and port taken
from the environment (``HOST``, ``PORT``).  The MongoDB connection
string is read from ``MONGODB_URI``; see ``blood_bank_api.app.core.config``
for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blood_bank_api.app.core.config import settings
from blood_bank_api.app.core.logging_config import setup_logging
from blood_bank_api.app.main import app

logger = logging.getLogger("blood_bank_api")


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    public_url = f"http://localhost:{settings.port}/"
    logger.info("Server running on port %s", settings.port)
    logger.info("Frontend available at: %s", public_url)
    logger.info("API available at: %sapi", public_url)
    logger.info("Environment: %s", settings.environment)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
