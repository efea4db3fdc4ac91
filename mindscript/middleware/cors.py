"""CORS configuration for the Mind-Script frontend."""
import logging

from fastapi.middleware.cors import CORSMiddleware

from mindscript import config

logger = logging.getLogger(__name__)


def add_cors_middleware(app):
    """Add CORS middleware restricted to the configured frontend origins."""
    logger.info("CORS allowed origins (%s): %s", config.ENVIRONMENT, config.ALLOWED_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
