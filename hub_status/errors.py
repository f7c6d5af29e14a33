"""
Exception hierarchy for the hub status service.

Two failure channels exist:

* ``MalformedRequestError`` is transport-tier. The request itself could not
  be decoded; it escapes the status endpoint and the application decides the
  HTTP status.
* ``AggregationError`` is body-tier. Reading the registry failed; the
  endpoint reports it in-band as ``{"success": false, "msg": ...}`` with
  HTTP 200.
"""


class HubStatusError(Exception):
    """Base class for every error raised by the status service."""


class MalformedRequestError(HubStatusError):
    """The request body is not a valid status query document."""


class AggregationError(HubStatusError):
    """Building the status snapshot from the registry failed."""
