import json
import logging
import sys
from typing import Any, Mapping, Optional

import click
from flask import Flask, jsonify, request

from hub_status import __version__
from hub_status.config import Config
from hub_status.errors import MalformedRequestError
from hub_status.extensions import cors
from hub_status.models import HubConfiguration
from hub_status.registry import HubRegistry, InMemoryRegistry
from hub_status.routes import register_routes
from hub_status.routes.status_routes import REGISTRY_EXTENSION_KEY, handle_status_request

logger = logging.getLogger(__name__)


def setup_logging(app: Flask) -> None:
    log_level = app.config.get("LOG_LEVEL", "INFO").upper()

    # Clear existing handlers
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    formatter = logging.Formatter(app.config["LOG_FORMAT"], datefmt="%Y-%m-%d %H:%M:%S")
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=[ch])
    logging.getLogger("werkzeug").setLevel(logging.INFO if not app.debug else logging.DEBUG)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(MalformedRequestError)
    def handle_malformed_request(e: MalformedRequestError):
        logger.warning(f"Rejected malformed status query: {e}")
        return jsonify({"error": "Bad Request", "message": str(e)}), 400

    # Read-only service: reject anything but GET
    @app.before_request
    def reject_non_get_requests():
        if request.method not in ("GET", "HEAD", "OPTIONS"):
            return jsonify({
                "error": "Method Not Allowed",
                "message": "The hub status API is read-only. Only GET requests are accepted."
            }), 405


def register_commands(app: Flask) -> None:
    @app.cli.command("hub-status")
    @click.option("--configuration", "configuration", default=None,
                  help="Comma separated list of fields to return.")
    def hub_status_command(configuration: Optional[str]):
        """Print the hub status snapshot as JSON."""
        registry = app.extensions[REGISTRY_EXTENSION_KEY]
        snapshot = handle_status_request(registry, configuration, b"")
        click.echo(json.dumps(snapshot, indent=2))


def create_app(registry: Optional[HubRegistry] = None,
               config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Creates and configures the hub status Flask application.

    Args:
        registry: Registry to report on. Defaults to an empty InMemoryRegistry
            seeded with the HUB_* configuration keys.
        config_overrides: Values applied on top of Config.

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.from_mapping(config_overrides)

    setup_logging(app)

    if registry is None:
        registry = InMemoryRegistry(HubConfiguration.from_app_config(app.config))
        logger.info("✅ No registry supplied; using an in-memory registry.")
    app.extensions[REGISTRY_EXTENSION_KEY] = registry

    cors.init_app(app, resources={f"{app.config['HUB_STATUS_PATH'].rstrip('/')}/*": {
        "origins": app.config["CORS_ORIGINS"],
        "methods": ["GET"],
    }})
    logger.info("✅ CORS initialized.")

    register_error_handlers(app)
    register_routes(app)
    register_commands(app)

    # Health check endpoint
    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "ok",
            "service": "Hub Status API",
            "version": __version__,
        }), 200

    logger.info("🚀 Hub status app created successfully!")
    return app
