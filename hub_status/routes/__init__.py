# hub_status/routes/__init__.py
"""
This module imports the blueprint instances from the route modules
and provides a function to register them on the Flask app.
"""
import logging
from flask import Flask

from .status_routes import status_bp

logger = logging.getLogger(__name__)


def register_routes(app: Flask):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(status_bp, url_prefix=app.config["HUB_STATUS_PATH"])
    logger.info(f"✅ Hub status blueprint registered at {app.config['HUB_STATUS_PATH']}")
