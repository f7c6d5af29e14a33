"""
Shared fixtures for the Hub Status API tests.

The default registry holds two nodes:
    node A: two chrome slots, one of them running a session
    node B: one idle firefox slot
"""
import pytest

from hub_status.factory import create_app
from hub_status.models import HubConfiguration
from hub_status.registry import InMemoryRegistry, Node, Slot

NODE_A_HOST = "http://10.0.0.11:5555"
NODE_B_HOST = "http://10.0.0.12:5555"
STATUS_PATH = "/grid/api/hub/"


@pytest.fixture
def hub_configuration():
    return HubConfiguration(timeout=300, servlets=["HubStatusServlet"])


@pytest.fixture
def registry(hub_configuration):
    """Create the two-node registry used across the suite."""
    reg = InMemoryRegistry(hub_configuration)

    busy_chrome = Slot({"browserName": "chrome", "platform": "LINUX"})
    busy_chrome.start_session()
    reg.add_node(Node(NODE_A_HOST, [busy_chrome, Slot({"browserName": "Chrome", "platform": "LINUX"})]))
    reg.add_node(Node(NODE_B_HOST, [Slot({"browserName": "firefox", "platform": "LINUX"})]))
    return reg


@pytest.fixture
def app(registry):
    """Create a test Flask application."""
    test_app = create_app(registry=registry)
    test_app.config["TESTING"] = True
    yield test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()
