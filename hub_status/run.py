#!/usr/bin/env python3
"""
Standalone runner for the Hub Status API.

Usage:
    python -m hub_status.run

Environment variables:
    HUB_STATUS_PORT: Port to bind to (default: 8080)
    HUB_STATUS_HOST: Interface to bind to (default: 0.0.0.0)
    HUB_STATUS_PATH: Path of the status endpoint (default: /grid/api/hub/)
"""
import logging
import os

from dotenv import load_dotenv

from hub_status.factory import create_app

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the hub status service."""
    # Load environment variables from .env file for local development.
    load_dotenv()

    port = int(os.environ.get("HUB_STATUS_PORT", 8080))
    host = os.environ.get("HUB_STATUS_HOST", "0.0.0.0")

    app = create_app()
    logger.info("Starting Hub Status API...")
    logger.info(f"Binding to {host}:{port}")
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
