"""
Declarative service and operation models, request objects and results.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type

from botocore import xform_name

logger = logging.getLogger(__name__)

REST_JSON = "rest-json"
JSON = "json"

CAMEL_CASE = "camel"
PASCAL_CASE = "pascal"

PATH_MEMBER_PATTERN = re.compile(r'\{(\w+)\}')


def is_snake_case(name: str) -> bool:
    return name == name.lower()


def member_key(name: str) -> str:
    """Normalise a member name (DomainId, domainId or domain_id) to its snake_case key."""
    return name if is_snake_case(name) else xform_name(name)


def snake_to_camel(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def snake_to_pascal(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


@dataclass
class Operation:
    """HTTP binding of one service operation."""
    name: str
    http_method: str
    path: str
    required: Optional[Tuple[str, ...]] = None
    query: Dict[str, str] = field(default_factory=dict)
    static_query: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    payload: Optional[str] = None
    host_prefix: Optional[str] = None
    result_headers: Dict[str, str] = field(default_factory=dict)
    result_payload: Optional[str] = None
    raw_response: bool = False
    validate_account_id: bool = False
    body_names: Tuple[str, ...] = ()
    body_members: bool = True

    def __post_init__(self):
        if self.required is None:
            self.required = tuple(self.path_members)
        else:
            self.required = tuple(self.required)
        self._body_names = {member_key(name): name for name in self.body_names}

    @property
    def path_members(self) -> List[str]:
        return PATH_MEMBER_PATTERN.findall(self.path)

    @property
    def method_name(self) -> str:
        return xform_name(self.name)

    @property
    def bound_members(self) -> frozenset:
        """Snake_case keys of members placed outside the JSON body."""
        names = list(self.path_members) + list(self.query) + list(self.headers)
        if self.payload:
            names.append(self.payload)
        return frozenset(member_key(name) for name in names)

    @property
    def has_body(self) -> bool:
        return self.http_method in ("POST", "PUT", "PATCH")

    def body_name(self, key: str) -> Optional[str]:
        """Exact body member name for a snake_case key when its casing is irregular (WebACLArn)."""
        return self._body_names.get(key)

    def path_parts(self) -> Iterator[Tuple[bool, str]]:
        """
        Yield (is_member, text) pieces of the path template in order.

        "/domains/{DomainId}/cases" yields (False, "/domains/"), (True, "DomainId"),
        (False, "/cases").
        """
        position = 0
        for match in PATH_MEMBER_PATTERN.finditer(self.path):
            if match.start() > position:
                yield False, self.path[position:match.start()]
            yield True, match.group(1)
            position = match.end()
        if position < len(self.path):
            yield False, self.path[position:]


@dataclass
class ServiceModel:
    """Static description of one AWS service."""
    service_id: str
    signing_name: str
    endpoint_prefix: str
    protocol: str
    api_version: str
    operations: List[Operation]
    errors: Mapping[str, Tuple[str, bool]] = field(default_factory=dict)
    body_casing: str = CAMEL_CASE
    target_prefix: Optional[str] = None
    json_version: str = "1.1"
    default_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self._by_name = {op.name: op for op in self.operations}
        self._by_method = {op.method_name: op for op in self.operations}

    @property
    def operation_names(self) -> List[str]:
        return [op.name for op in self.operations]

    def operation(self, name: str) -> Operation:
        """
        Look up an operation by its API name (GetCase) or method name (get_case).

        Raises:
            KeyError: If the service has no such operation
        """
        op = self._by_name.get(name) or self._by_method.get(name)
        if op is None:
            raise KeyError(f"{self.service_id} has no operation {name!r}")
        return op

    def wire_name(self, key: str) -> str:
        """Body member name for a snake_case key under the service casing."""
        if self.body_casing == PASCAL_CASE:
            return snake_to_pascal(key)
        return snake_to_camel(key)


class ServiceRequest:
    """
    Attribute bag of request members.

    Members are usually set with snake_case names and converted to the service's
    wire casing when serialised. Names given in any other casing
    (``WebACLArn``) are kept verbatim on the wire.

        request = GetCaseRequest(domain_id="d-1", case_id="c-1")
        request.fields = [{"id": "status"}]
        request.is_set("CaseId")  # True
    """

    operation: Optional[Operation] = None
    service_model: Optional[ServiceModel] = None

    def __init__(self, **members):
        object.__setattr__(self, "_members", {})
        self.set(**members)

    def __setattr__(self, name: str, value: Any):
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        key = member_key(name)
        if value is None:
            self._members.pop(key, None)
        else:
            self._members[key] = (None if is_snake_case(name) else name, value)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        entry = self._members.get(member_key(name))
        return entry[1] if entry else None

    def __delattr__(self, name: str):
        self._members.pop(member_key(name), None)

    def set(self, **members) -> "ServiceRequest":
        """Set several members at once and return the request."""
        for name, value in members.items():
            setattr(self, name, value)
        return self

    def is_set(self, name: str) -> bool:
        return member_key(name) in self._members

    def get(self, name: str, default: Any = None) -> Any:
        entry = self._members.get(member_key(name))
        return entry[1] if entry else default

    def members(self) -> Iterator[Tuple[str, Optional[str], Any]]:
        """Yield (snake_case key, verbatim wire name or None, value) for set members."""
        for key, (wire, value) in self._members.items():
            yield key, wire, value

    def copy(self) -> "ServiceRequest":
        clone = type(self)()
        clone._members.update(self._members)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        return {wire or key: value for key, wire, value in self.members()}

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ServiceRequest):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        name = type(self).__name__
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{name}({fields})"


def build_request_class(model: ServiceModel, operation: Operation, module: Optional[str] = None) -> Type[ServiceRequest]:
    """Create the ``<Operation>Request`` class for an operation."""
    return type(
        f"{operation.name}Request",
        (ServiceRequest,),
        {
            "operation": operation,
            "service_model": model,
            "__doc__": f"Request for {model.service_id} {operation.name} ({operation.http_method} {operation.path}).",
            "__module__": module or __name__,
        },
    )


class ServiceResult:
    """
    Parsed operation response.

    JSON members and bound response headers are readable as snake_case
    attributes; ``result.case_id`` reads the ``caseId`` member.
    """

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ):
        self._data = dict(data or {})
        self._keys = {member_key(k): k for k in self._data}
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body

    @property
    def request_id(self) -> Optional[str]:
        for name in ("x-amzn-RequestId", "x-amz-request-id"):
            for header, value in self.headers.items():
                if header.lower() == name.lower():
                    return value
        return None

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        key = self._keys.get(member_key(name))
        if key is None:
            raise AttributeError(f"{type(self).__name__} has no member {name!r}")
        return self._data[key]

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __contains__(self, name: str) -> bool:
        return member_key(name) in self._keys

    def get(self, name: str, default: Any = None) -> Any:
        key = self._keys.get(member_key(name))
        return self._data[key] if key is not None else default

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        if self.body is not None:
            return f"ServiceResult(status_code={self.status_code}, body={len(self.body)} bytes)"
        return f"ServiceResult(status_code={self.status_code}, data={self._data!r})"
