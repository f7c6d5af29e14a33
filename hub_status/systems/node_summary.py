# hub_status/systems/node_summary.py
from typing import Dict, Iterable, List

from hub_status.registry import RegisteredNode


def summarize_nodes(nodes: Iterable[RegisteredNode]) -> List[Dict[str, str]]:
    """One ``{"host": ...}`` entry per registered node, in registry order."""
    return [{"host": node.registration_host()} for node in nodes]
