import os


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


def _env_list(name: str, default: str = "") -> list:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """
    Unified configuration for the hub status service.
    Reads settings primarily from environment variables, with sensible defaults.
    """

    # --- General ---
    FLASK_ENV = os.environ.get("FLASK_ENV", "development").lower()
    DEBUG = FLASK_ENV != "production"

    # --- Logging ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # --- Endpoint ---
    HUB_STATUS_PATH = os.environ.get("HUB_STATUS_PATH", "/grid/api/hub/")

    # --- CORS Origins ---
    CORS_ORIGINS = _env_list("CORS_ORIGINS", "*")

    # --- Hub configuration document (seeds the default in-memory registry) ---
    HUB_HOST = os.environ.get("HUB_HOST", "0.0.0.0")
    HUB_PORT = int(os.environ.get("HUB_PORT", 4444))
    HUB_TIMEOUT = int(os.environ.get("HUB_TIMEOUT", 1800))
    HUB_BROWSER_TIMEOUT = int(os.environ.get("HUB_BROWSER_TIMEOUT", 0))
    HUB_CLEAN_UP_CYCLE = int(os.environ.get("HUB_CLEAN_UP_CYCLE", 5000))
    HUB_NEW_SESSION_WAIT_TIMEOUT = int(os.environ.get("HUB_NEW_SESSION_WAIT_TIMEOUT", -1))
    HUB_THROW_ON_CAPABILITY_NOT_PRESENT = _env_bool("HUB_THROW_ON_CAPABILITY_NOT_PRESENT", "true")
    HUB_SERVLETS = _env_list("HUB_SERVLETS")
