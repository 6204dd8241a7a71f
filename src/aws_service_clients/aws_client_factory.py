"""
Simple client factory for the service clients.
"""
from typing import Any, List, Optional

from .config import ClientConfiguration, get_aws_region
from .services import SERVICES, load_client_class


def get_client_config(region: Optional[str] = None, **overrides: Any) -> ClientConfiguration:
    """Get the standard configuration from the environment with optional overrides."""
    return ClientConfiguration.from_environment(region=region or get_aws_region(), **overrides)


def create_client(service_name: str, region: Optional[str] = None, **kwargs: Any):
    """
    Create a service client by service id, signing name or module name.

    Keyword arguments accepted by ServiceClient (credentials, executor, ...) are
    passed through; any other keyword overrides a ClientConfiguration field.

    Raises:
        KeyError: If the service is unknown
    """
    client_class = load_client_class(service_name)
    client_kwargs = {
        key: kwargs.pop(key)
        for key in ("config", "credentials", "credentials_provider", "endpoint_provider", "http_client", "executor")
        if key in kwargs
    }
    if "config" not in client_kwargs:
        client_kwargs["config"] = get_client_config(region, **kwargs)
    elif region or kwargs:
        raise TypeError("Pass either config or region/configuration overrides, not both")
    return client_class(**client_kwargs)


def available_services() -> List[str]:
    """Signing names of every available service."""
    return sorted(signing_name for _, _, signing_name in SERVICES.values())
