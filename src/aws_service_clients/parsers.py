"""
Response parsing for successful operation calls.
"""
import json
import logging
from typing import Any, Dict

from .http_client import HttpResponse
from .model import Operation, ServiceResult

logger = logging.getLogger(__name__)


class ResponseParseError(ValueError):
    """Raised when a successful response carries a body that is not valid JSON."""


def load_json(body: bytes) -> Dict[str, Any]:
    if not body or not body.strip():
        return {}
    try:
        document = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ResponseParseError(f"Response body is not valid JSON: {e}") from e
    if isinstance(document, dict):
        return document
    return {"value": document}


def parse_response(operation: Operation, response: HttpResponse) -> ServiceResult:
    """
    Build a ServiceResult from a 2xx response.

    Raises:
        ResponseParseError: If a JSON response cannot be decoded
    """
    headers = dict(response.headers.items())

    if operation.raw_response:
        data: Dict[str, Any] = {}
        body = response.body
    elif operation.result_payload:
        data = {operation.result_payload: load_json(response.body)} if response.body else {}
        body = None
    else:
        data = load_json(response.body)
        body = None

    for header, member in operation.result_headers.items():
        value = response.headers.get(header)
        if value is not None:
            data[member] = value

    if operation.raw_response:
        data["status"] = response.status_code

    return ServiceResult(data, status_code=response.status_code, headers=headers, body=body)
