"""
Signed HTTP clients for ten AWS services.

    from aws_service_clients import create_client

    with create_client("cases", region="us-west-2") as client:
        outcome = client.get_case(domain_id="d-1", case_id="c-1", fields=[{"id": "status"}])
        if outcome.is_success:
            print(outcome.result.fields)
        else:
            print(outcome.error)

Client classes are importable from the package root and load their service
module on first access.
"""
import importlib

from .aws_client_factory import available_services, create_client, get_client_config
from .config import ClientConfiguration
from .endpoint_provider import Endpoint, EndpointProvider
from .error_handler import (
    AWSClientError,
    AWSError,
    ConfigurationError,
    CoreErrors,
    EndpointResolutionError,
    ServiceError,
    SigningError,
)
from .model import ServiceRequest, ServiceResult
from .outcome import Outcome
from .retry_strategy import RetryStrategy
from .service_client import AsyncCallerContext, ServiceClient
from .services import SERVICES
from .version import __version__

_CLIENT_MODULES = {class_name: module_name for module_name, (class_name, _, _) in SERVICES.items()}

__all__ = [
    "AWSClientError",
    "AWSError",
    "AsyncCallerContext",
    "ClientConfiguration",
    "ConfigurationError",
    "CoreErrors",
    "Endpoint",
    "EndpointProvider",
    "EndpointResolutionError",
    "Outcome",
    "RetryStrategy",
    "ServiceClient",
    "ServiceError",
    "ServiceRequest",
    "ServiceResult",
    "SigningError",
    "available_services",
    "create_client",
    "get_client_config",
    "__version__",
    *sorted(_CLIENT_MODULES),
]


def __getattr__(name):
    module_name = _CLIENT_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = importlib.import_module(f"{__name__}.services.{module_name}")
    return getattr(module, name)
