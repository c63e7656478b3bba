"""
Application entry point.

All configuration, middleware and lifecycle management is delegated to the
application factory.
"""

import logging

from healthplus.config.settings import get_settings
from healthplus.core.app_factory import create_app

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Create application using factory
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "healthplus.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
