# hub_status/systems/slot_accountant.py
import logging
from typing import Any, Dict, Iterable, List

from hub_status.errors import AggregationError
from hub_status.registry import BROWSER_NAME, RegisteredNode, normalize_browser_name

logger = logging.getLogger(__name__)


class BrowserUtilization:
    """
    Total and free slot counts per browser name, kept in first-seen order.

    A browser with every slot occupied has no entry in the free counter and
    reports ``free == 0``.
    """

    def __init__(self):
        self._total: Dict[str, int] = {}
        self._free: Dict[str, int] = {}

    def record(self, browser: str, occupied: bool) -> None:
        self._total[browser] = self._total.get(browser, 0) + 1
        if not occupied:
            self._free[browser] = self._free.get(browser, 0) + 1

    def total(self, browser: str) -> int:
        return self._total.get(browser, 0)

    def free(self, browser: str) -> int:
        return self._free.get(browser, 0)

    def names(self) -> List[str]:
        return list(self._total)

    def to_list(self) -> List[Dict[str, Any]]:
        return [
            {"name": name, "total": total, "free": self._free.get(name, 0)}
            for name, total in self._total.items()
        ]


def compute_utilization(nodes: Iterable[RegisteredNode]) -> BrowserUtilization:
    """
    Walks every slot of every node once and counts slots per browser name.

    Raises AggregationError when a slot carries no browser name.
    """
    utilization = BrowserUtilization()
    for node in nodes:
        for slot in node.slots():
            browser = normalize_browser_name(slot.capability(BROWSER_NAME))
            if browser is None:
                raise AggregationError(
                    f"Slot on node '{node.registration_host()}' has no '{BROWSER_NAME}' capability"
                )
            utilization.record(browser, occupied=slot.active_session() is not None)

    logger.debug(f"Browser utilization computed for {len(utilization.names())} browser(s).")
    return utilization
