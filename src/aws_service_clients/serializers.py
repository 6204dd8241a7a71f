"""
Request serialisation for the rest-json and json protocols.
"""
import base64
import datetime
import json
import logging
from email.utils import formatdate
from typing import Any, Dict, List, Optional, Tuple

from .endpoint_provider import Endpoint
from .model import JSON, Operation, ServiceModel, ServiceRequest, lower_first, member_key, snake_to_camel

logger = logging.getLogger(__name__)

ISO8601 = '%Y-%m-%dT%H:%M:%SZ'
ISO8601_MICRO = '%Y-%m-%dT%H:%M:%S.%fZ'


def _to_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def timestamp_iso8601(value: datetime.datetime) -> str:
    value = _to_utc(value)
    return value.strftime(ISO8601_MICRO if value.microsecond else ISO8601)


def timestamp_epoch(value: datetime.datetime) -> Any:
    seconds = _to_utc(value).timestamp()
    return int(seconds) if seconds == int(seconds) else seconds


def timestamp_rfc822(value: datetime.datetime) -> str:
    return formatdate(_to_utc(value).timestamp(), usegmt=True)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime.datetime):
        return timestamp_epoch(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, ServiceRequest):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any) -> bytes:
    return json.dumps(value, default=_json_default, separators=(",", ":")).encode("utf-8")


def query_values(value: Any) -> List[str]:
    """Stringify a query member; lists yield one value per element."""
    if isinstance(value, (list, tuple, set)):
        return [v for item in value for v in query_values(item)]
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, datetime.datetime):
        return [timestamp_iso8601(value)]
    return [str(value)]


def header_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime):
        return timestamp_rfc822(value)
    if isinstance(value, (list, tuple)):
        return ",".join(header_value(v) for v in value)
    return str(value)


def payload_bytes(value: Any) -> bytes:
    """Serialise an explicit payload member: raw blobs pass through, structures become JSON."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if hasattr(value, "read"):
        data = value.read()
        return data.encode("utf-8") if isinstance(data, str) else data
    return dumps(value)


def body_member_name(model: ServiceModel, operation: Operation, key: str, verbatim: Optional[str]) -> str:
    """Modeled name first, then the caller's spelling, then the service casing."""
    return operation.body_name(key) or verbatim or model.wire_name(key)


class RestJsonSerializer:
    """Binds request members to the path, query string, headers and JSON body."""

    content_type = "application/json"

    def __init__(self, model: ServiceModel):
        self.model = model

    def add_path(self, operation: Operation, request: ServiceRequest, endpoint: Endpoint):
        for is_member, text in operation.path_parts():
            if is_member:
                endpoint.add_path_segment(request.get(text))
            else:
                endpoint.add_path_segments(text)

    def add_query(self, operation: Operation, request: ServiceRequest, endpoint: Endpoint):
        if operation.static_query:
            endpoint.set_query_string(operation.static_query)

        params: List[Tuple[str, str]] = []
        declared = {member_key(member): wire for member, wire in operation.query.items()}
        for key, wire in declared.items():
            if request.is_set(key):
                params.extend((wire, v) for v in query_values(request.get(key)))

        if not operation.has_body:
            # Remaining members of GET and DELETE operations travel in the query string.
            bound = operation.bound_members
            for key, verbatim, value in request.members():
                if key in bound:
                    continue
                wire = lower_first(verbatim) if verbatim else snake_to_camel(key)
                if isinstance(value, dict):
                    params.extend((str(k), v) for k, item in value.items() for v in query_values(item))
                else:
                    params.extend((wire, v) for v in query_values(value))

        endpoint.add_query_parameters(params)

    def headers(self, operation: Operation, request: ServiceRequest) -> Dict[str, str]:
        headers = dict(self.model.default_headers)
        for member, header in operation.headers.items():
            if request.is_set(member):
                headers[header] = header_value(request.get(member))
        return headers

    def body(self, operation: Operation, request: ServiceRequest) -> Tuple[Optional[bytes], Optional[str]]:
        """
        Serialise the request body.

        Returns:
            Tuple of (body bytes or None, content type or None)
        """
        if operation.payload:
            if not request.is_set(operation.payload):
                return None, None
            value = request.get(operation.payload)
            if isinstance(value, (dict, list)):
                return dumps(value), self.content_type
            return payload_bytes(value), "application/octet-stream"

        if not operation.has_body:
            return None, None

        bound = operation.bound_members
        document = {
            body_member_name(self.model, operation, key, verbatim): value
            for key, verbatim, value in request.members()
            if key not in bound
        }
        if not document and not operation.body_members:
            return None, None
        return dumps(document), self.content_type

    def serialize(self, operation: Operation, request: ServiceRequest, endpoint: Endpoint) -> Tuple[Dict[str, str], Optional[bytes]]:
        """Complete the endpoint and return (headers, body) for the request."""
        self.add_path(operation, request, endpoint)
        self.add_query(operation, request, endpoint)
        headers = self.headers(operation, request)
        body, content_type = self.body(operation, request)
        if content_type and "Content-Type" not in headers:
            headers["Content-Type"] = content_type
        return headers, body


class JsonRpcSerializer:
    """Serialises every member into a JSON document posted to "/" with an X-Amz-Target header."""

    def __init__(self, model: ServiceModel):
        self.model = model
        self.content_type = f"application/x-amz-json-{model.json_version}"

    def serialize(self, operation: Operation, request: ServiceRequest, endpoint: Endpoint) -> Tuple[Dict[str, str], Optional[bytes]]:
        endpoint.add_path_segments(operation.path)
        headers = dict(self.model.default_headers)
        headers["X-Amz-Target"] = f"{self.model.target_prefix}.{operation.name}"
        headers["Content-Type"] = self.content_type
        document = {
            body_member_name(self.model, operation, key, verbatim): value
            for key, verbatim, value in request.members()
        }
        return headers, dumps(document)


def create_serializer(model: ServiceModel):
    if model.protocol == JSON:
        return JsonRpcSerializer(model)
    return RestJsonSerializer(model)
