#!/usr/bin/env python3
"""
Querylens
Main application runner for the natural-language database query service.
"""
import os
import sys
import logging

import uvicorn

from querylens.common.env import load_environment

load_environment()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_environment() -> bool:
    """Check if environment is properly configured."""
    missing = [name for name in ("GEMINI_API_KEY", "DATABASE_URL") if not os.getenv(name)]
    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        logger.error("Add them to your .env file")
        return False
    return True


def main():
    """Main application entry point."""
    if not check_environment():
        sys.exit(1)

    from querylens.common.config import config

    host = config.server.host
    port = config.server.port
    reload = os.getenv('RELOAD', 'false').lower() == 'true'

    logger.info(f"Backend server listening at http://localhost:{port}")
    uvicorn.run("querylens.api.server:app", host=host, port=port, reload=reload)


if __name__ == '__main__':
    main()
