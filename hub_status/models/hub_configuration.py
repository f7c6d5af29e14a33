# hub_status/models/hub_configuration.py
import logging
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

DEFAULT_CAPABILITY_MATCHER = "hub_status.DefaultCapabilityMatcher"


class HubConfiguration(BaseModel):
    """
    Static configuration of the hub, as exposed on the status endpoint.

    Keys are serialized in camelCase. Unknown keys are kept so that a registry
    can publish settings this model does not know about.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    role: str = "hub"
    host: str = "0.0.0.0"
    port: int = 4444
    timeout: int = 1800
    browser_timeout: int = 0
    clean_up_cycle: int = 5000
    new_session_wait_timeout: int = -1
    throw_on_capability_not_present: bool = True
    capability_matcher: str = DEFAULT_CAPABILITY_MATCHER
    servlets: List[str] = Field(default_factory=list)
    without_servlets: List[str] = Field(default_factory=list)
    debug: bool = False

    @classmethod
    def from_app_config(cls, config: Mapping[str, Any]) -> "HubConfiguration":
        """Builds the document from the HUB_* keys of a Flask config."""
        return cls(
            host=config.get("HUB_HOST", "0.0.0.0"),
            port=config.get("HUB_PORT", 4444),
            timeout=config.get("HUB_TIMEOUT", 1800),
            browser_timeout=config.get("HUB_BROWSER_TIMEOUT", 0),
            clean_up_cycle=config.get("HUB_CLEAN_UP_CYCLE", 5000),
            new_session_wait_timeout=config.get("HUB_NEW_SESSION_WAIT_TIMEOUT", -1),
            throw_on_capability_not_present=config.get("HUB_THROW_ON_CAPABILITY_NOT_PRESENT", True),
            servlets=list(config.get("HUB_SERVLETS", [])),
            debug=bool(config.get("DEBUG", False)),
        )

    def to_document(self) -> Dict[str, Any]:
        """Returns the JSON-ready document with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
