# hub_status/systems/field_selector.py
import logging
from typing import Any, FrozenSet, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

CONFIGURATION_KEY = "configuration"


class FieldSet:
    """
    The set of status fields a caller asked for.

    ``FieldSet.all()`` is the sentinel meaning "every field". An absent
    filter and an explicitly empty one both collapse to it.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Optional[FrozenSet[str]] = None):
        self._names = names or None

    @classmethod
    def all(cls) -> "FieldSet":
        return cls(None)

    @property
    def is_all(self) -> bool:
        return self._names is None

    @property
    def names(self) -> FrozenSet[str]:
        return self._names or frozenset()

    def includes(self, key: str) -> bool:
        return self._names is None or key in self._names

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FieldSet) and self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return "FieldSet(all)" if self.is_all else f"FieldSet({sorted(self._names)})"


ALL_FIELDS = FieldSet.all()


class StatusQuerySchema(BaseModel):
    """Request body of a status query; other keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    configuration: Optional[List[Any]] = None


def _from_query(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _from_body(body: Optional[Mapping[str, Any]]) -> Optional[List[str]]:
    if not body:
        return None
    values = body.get(CONFIGURATION_KEY)
    if values is None:
        return None
    return [value for value in values if isinstance(value, str)]


def resolve_field_set(query_value: Optional[str], body: Optional[Mapping[str, Any]] = None) -> FieldSet:
    """
    Resolves the requested fields. A non-empty query parameter wins over the
    body's ``configuration`` array; whatever resolves to nothing means all fields.
    """
    if query_value:
        requested = _from_query(query_value)
        source = "query"
    else:
        requested = _from_body(body)
        source = "body"

    if not requested:
        logger.debug("No field filter supplied; returning all fields.")
        return ALL_FIELDS

    logger.debug(f"Field filter from {source}: {requested}")
    return FieldSet(frozenset(requested))
