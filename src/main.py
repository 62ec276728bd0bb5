"""Main application entry point.

Runs the FastAPI service with uvicorn. Environment variables are loaded
from a .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Host, port and log level come from HOST, PORT and LOG_LEVEL.
    """
    import uvicorn

    from src.api.app import create_app
    from src.config import get_settings

    settings = get_settings()
    app = create_app(settings)

    logger.info(f"Starting PDF narrator on http://{settings.host}:{settings.port}")
    logger.info(f"API docs available at http://{settings.host}:{settings.port}/docs")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
