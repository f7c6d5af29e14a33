# hub_status/registry.py
"""
Registry collaborator used by the status endpoint.

The status core depends only on the protocols below. ``InMemoryRegistry`` is
a thread-safe implementation backing the standalone runner and the tests:
node registration, session assignment and the pending-request queue may be
mutated from other threads while status queries iterate over it.
"""
import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Protocol, Tuple

from hub_status.models import HubConfiguration

logger = logging.getLogger(__name__)

BROWSER_NAME = "browserName"


def normalize_browser_name(value: Any) -> Optional[str]:
    """Upper-cased browser name, or None when the value is missing or blank."""
    if value is None:
        return None
    name = str(value).strip()
    return name.upper() if name else None


# --- Consumed interfaces ---

class ExecutionSlot(Protocol):
    def capability(self, name: str) -> Any: ...

    def active_session(self) -> Optional["Session"]: ...


class RegisteredNode(Protocol):
    def registration_host(self) -> str: ...

    def slots(self) -> Iterable[ExecutionSlot]: ...


class HubRegistry(Protocol):
    def configuration(self) -> Dict[str, Any]: ...

    def pending_session_request_count(self) -> int: ...

    def all_nodes(self) -> Iterable[RegisteredNode]: ...


# --- In-memory implementation ---

class Capabilities(Mapping[str, Any]):
    """Read-only key/value attributes describing a slot's environment."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._values: Dict[str, Any] = dict(values or {}, **kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Capabilities({self._values!r})"

    def browser_name(self) -> Optional[str]:
        """Browser name normalized to upper case, or None when missing or blank."""
        return normalize_browser_name(self._values.get(BROWSER_NAME))


@dataclass(frozen=True)
class Session:
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Slot:
    """One concurrent test-session capacity on a node."""

    def __init__(self, capabilities: Mapping[str, Any]):
        self.capabilities = capabilities if isinstance(capabilities, Capabilities) else Capabilities(capabilities)
        self._session: Optional[Session] = None
        self._lock = threading.Lock()

    def capability(self, name: str) -> Any:
        return self.capabilities.get(name)

    def active_session(self) -> Optional[Session]:
        with self._lock:
            return self._session

    def start_session(self, session: Optional[Session] = None) -> Session:
        """Occupies the slot. Raises RuntimeError if it is already in use."""
        with self._lock:
            if self._session is not None:
                raise RuntimeError(f"Slot already runs session {self._session.session_id}")
            self._session = session or Session()
            return self._session

    def release(self) -> Optional[Session]:
        with self._lock:
            session, self._session = self._session, None
            return session


class Node:
    """A registered execution endpoint contributing slots to the hub."""

    def __init__(self, host: str, slots: Iterable[Slot] = (), node_id: Optional[str] = None):
        self.node_id = node_id or host
        self._host = host
        self._slots = list(slots)
        self._lock = threading.Lock()

    def registration_host(self) -> str:
        return self._host

    def slots(self) -> Tuple[Slot, ...]:
        with self._lock:
            return tuple(self._slots)

    def add_slot(self, slot: Slot) -> Slot:
        with self._lock:
            self._slots.append(slot)
        return slot

    def __repr__(self) -> str:
        return f"Node(id={self.node_id!r}, host={self._host!r})"


class InMemoryRegistry:
    """
    Thread-safe registry of nodes kept in registration order.

    Readers receive tuple snapshots taken under the lock, so iteration never
    races with registration or removal. Consecutive reads are independent;
    no cross-call snapshot is offered.
    """

    def __init__(self, configuration: Optional[HubConfiguration] = None):
        self._configuration = configuration or HubConfiguration()
        self._nodes: "OrderedDict[str, Node]" = OrderedDict()
        self._pending_requests: "OrderedDict[str, Mapping[str, Any]]" = OrderedDict()
        self._lock = threading.RLock()
        logger.info("🗂️ InMemoryRegistry instance created.")

    # --- Read contract ---

    def configuration(self) -> Dict[str, Any]:
        return self._configuration.to_document()

    def pending_session_request_count(self) -> int:
        with self._lock:
            return len(self._pending_requests)

    def all_nodes(self) -> Tuple[Node, ...]:
        with self._lock:
            return tuple(self._nodes.values())

    # --- Mutators (hub side, never called by the status core) ---

    def add_node(self, node: Node) -> Node:
        with self._lock:
            if node.node_id in self._nodes:
                logger.warning(f"Node '{node.node_id}' re-registered; replacing previous entry.")
                del self._nodes[node.node_id]
            self._nodes[node.node_id] = node
            total = len(self._nodes)
        logger.info(f"Node '{node.node_id}' registered. Total nodes: {total}")
        return node

    def remove_node(self, node_id: str) -> Optional[Node]:
        with self._lock:
            node = self._nodes.pop(node_id, None)
        if node is None:
            logger.warning(f"Attempted to remove unknown node '{node_id}'.")
        else:
            logger.info(f"Node '{node_id}' removed.")
        return node

    def enqueue_session_request(self, desired_capabilities: Optional[Mapping[str, Any]] = None) -> str:
        request_id = uuid.uuid4().hex
        with self._lock:
            self._pending_requests[request_id] = dict(desired_capabilities or {})
        return request_id

    def dequeue_session_request(self, request_id: str) -> bool:
        with self._lock:
            return self._pending_requests.pop(request_id, None) is not None
