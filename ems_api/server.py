"""
Run the API with uvicorn. From the project root:

  python -m ems_api.server
"""

import logging
import sys

import uvicorn

from ems_api.core.config import get_settings
from ems_api.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server running on port %s", settings.PORT)
    logger.info("Environment: %s", settings.APP_ENV)
    uvicorn.run(
        "ems_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
