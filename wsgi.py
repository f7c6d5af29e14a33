import logging
from hub_status.factory import create_app

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

try:
    app = create_app()
    logger.info("✅ WSGI application instance created.")

except Exception as e:
    logger.exception("🚨 CRITICAL FAILURE in wsgi.py: %s", str(e))
    raise
