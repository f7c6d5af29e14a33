# hub_status/routes/status_routes.py
"""
API to query the hub status remotely.

Send a GET to the status path (``/grid/api/hub/`` by default) with a JSON
body naming the fields you are interested in, for instance the hub timeout
and the registered servlets::

    {"configuration": ["timeout", "servlets"]}

Alternatively use the query string ``?configuration=timeout,servlets``.
If no field is specified, every field known to the hub is returned.
"""
import http
import json
import logging
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from hub_status.errors import AggregationError, MalformedRequestError
from hub_status.registry import HubRegistry
from hub_status.systems.field_selector import CONFIGURATION_KEY, StatusQuerySchema, resolve_field_set
from hub_status.systems.status import StatusAggregator

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
REGISTRY_EXTENSION_KEY = "hub_registry"

status_bp = Blueprint("status_bp", __name__)


def get_registry() -> HubRegistry:
    """Returns the registry attached to the running application."""
    return current_app.extensions[REGISTRY_EXTENSION_KEY]


def decode_body(raw: bytes) -> Optional[Dict[str, Any]]:
    """
    Decodes a status query body. An empty body decodes to None.

    Raises MalformedRequestError when the body is not a JSON object with an
    optional ``configuration`` array.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRequestError(f"Request body is not valid UTF-8: {e}") from e
    if not text.strip():
        return None

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise MalformedRequestError("Request body must be a JSON object")

    try:
        query = StatusQuerySchema.model_validate(document)
    except ValidationError as e:
        raise MalformedRequestError(f"Invalid '{CONFIGURATION_KEY}' field: {e.errors()}") from e
    return query.model_dump()


def handle_status_request(registry: HubRegistry, query_value: Optional[str], raw_body: Optional[bytes]) -> Dict[str, Any]:
    """
    Builds the response document for one status query.

    ``raw_body`` is None when the request has no input stream at all, in which
    case nothing is aggregated. Body decode errors propagate; aggregation
    errors are reported in-band.
    """
    if raw_body is None:
        return {"success": True}

    body = decode_body(raw_body)
    field_set = resolve_field_set(query_value, body)
    try:
        return StatusAggregator(registry).build(field_set)
    except AggregationError as e:
        logger.error(f"Error building hub status: {e}", exc_info=True)
        return {"success": False, "msg": str(e)}


def _raw_body() -> Optional[bytes]:
    if request.environ.get("wsgi.input") is None:
        return None
    return request.get_data(cache=False)


@status_bp.route("/", methods=["GET"], strict_slashes=False)
def hub_status_endpoint():
    """Returns the filtered hub status. Always HTTP 200; clients branch on 'success'."""
    payload = handle_status_request(
        get_registry(),
        request.args.get(CONFIGURATION_KEY),
        _raw_body(),
    )
    response = jsonify(payload)
    response.status_code = http.HTTPStatus.OK
    response.headers["Content-Type"] = JSON_CONTENT_TYPE
    return response
