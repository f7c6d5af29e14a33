"""
Status queries running while the hub mutates its registry.

Reads are best effort: fields may disagree with each other, but every
query must complete and every browser entry must stay consistent.
"""
import threading

from hub_status.registry import Node, Slot
from hub_status.systems.field_selector import ALL_FIELDS
from hub_status.systems.status import StatusAggregator


def _churn(registry, stop_event):
    """Register and drop nodes, and start and release sessions, until stopped."""
    counter = 0
    while not stop_event.is_set():
        counter += 1
        node = Node(f"http://churn-{counter % 5}:5555", [Slot({"browserName": "edge"}) for _ in range(3)])
        registry.add_node(node)
        for slot in node.slots():
            slot.start_session()
        request_id = registry.enqueue_session_request({"browserName": "edge"})
        node.slots()[0].release()
        registry.dequeue_session_request(request_id)
        registry.remove_node(node.node_id)


def test_queries_survive_concurrent_mutation(registry):
    stop_event = threading.Event()
    writer = threading.Thread(target=_churn, args=(registry, stop_event), daemon=True)
    writer.start()

    aggregator = StatusAggregator(registry)
    try:
        for _ in range(300):
            snapshot = aggregator.build(ALL_FIELDS)
            assert snapshot["success"] is True
            assert snapshot["newSessionRequestCount"] >= 0
            for browser in snapshot["browsers"]:
                assert browser["total"] >= 1
                assert 0 <= browser["free"] <= browser["total"]
    finally:
        stop_event.set()
        writer.join(timeout=5)

    assert not writer.is_alive()


def test_concurrent_readers_see_same_snapshot(app):
    results = []
    errors = []

    def query():
        try:
            response = app.test_client().get("/grid/api/hub/?configuration=nodes,browsers")
            results.append(response.get_json())
        except Exception as e:  # surfaced by the assertion below
            errors.append(e)

    threads = [threading.Thread(target=query) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert errors == []
    assert len(results) == 8
    assert all(result == results[0] for result in results)
