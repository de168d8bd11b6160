from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

import requests

from ..core.enums import Collection
from ..core.exceptions import NotFoundError, TransportError

logger = logging.getLogger(__name__)


@contextmanager
def store_request(collection: Collection, action: str) -> Iterator[None]:
    """Translate requests' exceptions into TransportError."""
    try:
        yield
    except requests.RequestException as e:
        logger.error("%s %s failed: %s", action, collection.value, e)
        raise TransportError(f"Could not {action} {collection.value}: {e}") from e


def check_response(
    response: requests.Response,
    collection: Collection,
    *,
    record_id: Any = None,
) -> requests.Response:
    if response.status_code == 404 and record_id is not None:
        raise NotFoundError(collection, record_id)
    if not 200 <= response.status_code < 300:
        logger.error(
            "%s %s returned HTTP %s", response.request.method if response.request else "?", collection.value, response.status_code
        )
        raise TransportError(
            f"Store returned HTTP {response.status_code} for {collection.value}",
            status_code=response.status_code,
        )
    return response


def _json_body(response: requests.Response, collection: Collection) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(f"Store returned a malformed body for {collection.value}") from e


def json_list(response: requests.Response, collection: Collection) -> List[Dict[str, Any]]:
    body = _json_body(response, collection)
    if not isinstance(body, list) or not all(isinstance(r, dict) for r in body):
        raise TransportError(f"Expected a list of {collection.value} records")
    return list(body)


def json_record(response: requests.Response, collection: Collection) -> Dict[str, Any]:
    body = _json_body(response, collection)
    if not isinstance(body, dict):
        raise TransportError(f"Expected a {collection.value} record")
    return body


