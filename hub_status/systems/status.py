# hub_status/systems/status.py
"""
Status snapshot assembly.

Each field is read from the registry independently: the configuration, the
pending-request counter, the node list and the browser utilization are point
in time reads, not one atomic snapshot. A node registered or a session
released between two reads may therefore show up in one field and not in
another. No lock is taken here; the registry guards its own collections.
"""
import logging
from typing import Any, Callable, Dict

from hub_status.errors import AggregationError
from hub_status.registry import HubRegistry
from hub_status.systems.field_selector import ALL_FIELDS, FieldSet
from hub_status.systems.node_summary import summarize_nodes
from hub_status.systems.slot_accountant import compute_utilization

logger = logging.getLogger(__name__)

NEW_SESSION_REQUEST_COUNT = "newSessionRequestCount"
NODES = "nodes"
BROWSERS = "browsers"


class StatusAggregator:
    """Builds the filtered status snapshot of a hub registry."""

    def __init__(self, registry: HubRegistry):
        self.registry = registry
        self._derived_fields: Dict[str, Callable[[], Any]] = {
            NEW_SESSION_REQUEST_COUNT: self.registry.pending_session_request_count,
            NODES: lambda: summarize_nodes(self.registry.all_nodes()),
            BROWSERS: lambda: compute_utilization(self.registry.all_nodes()).to_list(),
        }

    def build(self, field_set: FieldSet = ALL_FIELDS) -> Dict[str, Any]:
        """
        Returns ``{"success": True, ...selected fields}``.

        Derived fields are only computed when selected. Any failure raises
        AggregationError and nothing assembled so far is returned.
        """
        try:
            snapshot: Dict[str, Any] = {}
            for key, value in self.registry.configuration().items():
                if field_set.includes(key):
                    snapshot[key] = value
            for key, compute in self._derived_fields.items():
                if field_set.includes(key):
                    snapshot[key] = compute()
        except AggregationError:
            raise
        except Exception as e:
            raise AggregationError(str(e) or e.__class__.__name__) from e

        return {"success": True, **snapshot}
