# hub_status/systems/__init__.py
from .field_selector import ALL_FIELDS, FieldSet, StatusQuerySchema, resolve_field_set
from .node_summary import summarize_nodes
from .slot_accountant import BrowserUtilization, compute_utilization
from .status import StatusAggregator

__all__ = [
    "ALL_FIELDS",
    "FieldSet",
    "StatusQuerySchema",
    "resolve_field_set",
    "summarize_nodes",
    "BrowserUtilization",
    "compute_utilization",
    "StatusAggregator",
]
