"""Tests for per-browser slot accounting and node summaries."""
import pytest

from hub_status.errors import AggregationError
from hub_status.registry import InMemoryRegistry, Node, Slot
from hub_status.systems.node_summary import summarize_nodes
from hub_status.systems.slot_accountant import BrowserUtilization, compute_utilization

from conftest import NODE_A_HOST, NODE_B_HOST


def test_utilization_counts_total_and_free(registry):
    utilization = compute_utilization(registry.all_nodes())
    assert utilization.to_list() == [
        {"name": "CHROME", "total": 2, "free": 1},
        {"name": "FIREFOX", "total": 1, "free": 1},
    ]


def test_fully_occupied_browser_reports_zero_free():
    slot = Slot({"browserName": "safari"})
    slot.start_session()
    utilization = compute_utilization([Node("http://mac:5555", [slot])])
    assert utilization.to_list() == [{"name": "SAFARI", "total": 1, "free": 0}]


def test_free_never_exceeds_total(registry):
    registry.all_nodes()[1].slots()[0].start_session()
    utilization = compute_utilization(registry.all_nodes())
    for name in utilization.names():
        assert utilization.total(name) >= 1
        assert 0 <= utilization.free(name) <= utilization.total(name)


def test_output_order_follows_first_appearance():
    nodes = [
        Node("http://a:5555", [Slot({"browserName": "firefox"})]),
        Node("http://b:5555", [Slot({"browserName": "chrome"}), Slot({"browserName": "FireFox"})]),
    ]
    names = [entry["name"] for entry in compute_utilization(nodes).to_list()]
    assert names == ["FIREFOX", "CHROME"]


@pytest.mark.parametrize("capabilities", [{}, {"browserName": None}, {"browserName": "  "}])
def test_slot_without_browser_name_fails_aggregation(capabilities):
    nodes = [Node("http://broken:5555", [Slot(capabilities)])]
    with pytest.raises(AggregationError, match="http://broken:5555"):
        compute_utilization(nodes)


def test_empty_registry_has_no_browsers():
    assert compute_utilization(InMemoryRegistry().all_nodes()).to_list() == []


def test_unknown_browser_defaults_to_zero():
    utilization = BrowserUtilization()
    assert utilization.total("OPERA") == 0
    assert utilization.free("OPERA") == 0


def test_node_summary_in_registry_order(registry):
    assert summarize_nodes(registry.all_nodes()) == [{"host": NODE_A_HOST}, {"host": NODE_B_HOST}]


def test_node_summary_keeps_duplicate_hosts():
    nodes = [Node("http://dup:5555", node_id="one"), Node("http://dup:5555", node_id="two")]
    assert summarize_nodes(nodes) == [{"host": "http://dup:5555"}, {"host": "http://dup:5555"}]
