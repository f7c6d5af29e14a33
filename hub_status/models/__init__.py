# hub_status/models/__init__.py
from .hub_configuration import HubConfiguration

__all__ = ["HubConfiguration"]
