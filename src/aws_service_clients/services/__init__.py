"""
Service client modules.

Each module declares one ServiceModel and its ServiceClient subclass. Request
classes (``GetCaseRequest``) are created from the model on first access.
"""
import importlib
from typing import Callable, Dict, Tuple, Type

# Module name -> (client class name, service id, signing name)
SERVICES: Dict[str, Tuple[str, str, str]] = {
    "connectcases": ("ConnectCasesClient", "ConnectCases", "cases"),
    "finspace_data": ("FinSpaceDataClient", "finspace data", "finspace-api"),
    "glacier": ("GlacierClient", "Glacier", "glacier"),
    "iotsitewise": ("IoTSiteWiseClient", "IoTSiteWise", "iotsitewise"),
    "lookoutequipment": ("LookoutEquipmentClient", "LookoutEquipment", "lookoutequipment"),
    "lookoutmetrics": ("LookoutMetricsClient", "LookoutMetrics", "lookoutmetrics"),
    "resiliencehub": ("ResilienceHubClient", "resiliencehub", "resiliencehub"),
    "schemas": ("SchemasClient", "schemas", "schemas"),
    "ssm_incidents": ("SSMIncidentsClient", "SSM Incidents", "ssm-incidents"),
    "wafv2": ("WAFV2Client", "WAFV2", "wafv2"),
}

# Exceptions shared by most recent rest-json services: name -> (error code, retryable)
STANDARD_ERRORS: Dict[str, Tuple[str, bool]] = {
    "AccessDeniedException": ("ACCESS_DENIED", False),
    "ConflictException": ("CONFLICT", False),
    "InternalServerException": ("INTERNAL_SERVER", True),
    "ResourceNotFoundException": ("RESOURCE_NOT_FOUND", False),
    "ServiceQuotaExceededException": ("SERVICE_QUOTA_EXCEEDED", False),
    "ThrottlingException": ("THROTTLING", True),
    "ValidationException": ("VALIDATION", False),
}


def _normalize(name: str) -> str:
    return name.lower().replace("-", "").replace("_", "").replace(" ", "")


def find_module(service_name: str) -> str:
    """
    Resolve a module name, service id or signing name to a service module name.

    Raises:
        KeyError: If the name matches no service
    """
    wanted = _normalize(service_name)
    for module_name, (class_name, service_id, signing_name) in SERVICES.items():
        candidates = (module_name, service_id, signing_name, class_name, class_name[:-len("Client")])
        if any(_normalize(candidate) == wanted for candidate in candidates):
            return module_name
    raise KeyError(f"Unknown service: {service_name}")


def load_client_class(service_name: str) -> Type:
    module_name = find_module(service_name)
    module = importlib.import_module(f"{__name__}.{module_name}")
    return getattr(module, SERVICES[module_name][0])


def request_class_getattr(client_class: Type, module_name: str) -> Callable[[str], Type]:
    """Build a module ``__getattr__`` resolving ``<Operation>Request`` names."""

    def __getattr__(name: str) -> Type:
        if name.endswith("Request") and name[:-len("Request")] in client_class.request_classes:
            return client_class.request_classes[name[:-len("Request")]]
        raise AttributeError(f"module {module_name!r} has no attribute {name!r}")

    return __getattr__
