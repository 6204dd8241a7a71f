"""
Amazon EventBridge Schemas client.
"""
from ..model import PASCAL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import request_class_getattr

SERVICE_NAME = "schemas"
API_VERSION = "2019-12-02"

ERRORS = {
    "BadRequestException": ("BAD_REQUEST", False),
    "ConflictException": ("CONFLICT", False),
    "ForbiddenException": ("FORBIDDEN", False),
    "GoneException": ("GONE", False),
    "InternalServerErrorException": ("INTERNAL_SERVER_ERROR", True),
    "NotFoundException": ("NOT_FOUND", False),
    "PreconditionFailedException": ("PRECONDITION_FAILED", False),
    "ServiceUnavailableException": ("SERVICE_UNAVAILABLE", True),
    "TooManyRequestsException": ("TOO_MANY_REQUESTS", True),
    "UnauthorizedException": ("UNAUTHORIZED", False),
}

OPERATIONS = [
    Operation("CreateDiscoverer", "POST", "/v1/discoverers", body_names=("tags",)),
    Operation("CreateRegistry", "POST", "/v1/registries/name/{RegistryName}", body_names=("tags",)),
    Operation(
        "CreateSchema", "POST", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}",
        body_names=("tags",),
    ),
    Operation("DeleteDiscoverer", "DELETE", "/v1/discoverers/id/{DiscovererId}"),
    Operation("DeleteRegistry", "DELETE", "/v1/registries/name/{RegistryName}"),
    Operation("DeleteResourcePolicy", "DELETE", "/v1/policy"),
    Operation("DeleteSchema", "DELETE", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}"),
    Operation(
        "DeleteSchemaVersion", "DELETE", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/version/{SchemaVersion}",
    ),
    Operation(
        "DescribeCodeBinding", "GET", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/language/{Language}",
        required=("Language", "RegistryName", "SchemaName"),
    ),
    Operation("DescribeDiscoverer", "GET", "/v1/discoverers/id/{DiscovererId}"),
    Operation("DescribeRegistry", "GET", "/v1/registries/name/{RegistryName}"),
    Operation("DescribeSchema", "GET", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}"),
    Operation(
        "ExportSchema", "GET", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/export",
        required=("RegistryName", "SchemaName", "Type"),
    ),
    Operation(
        "GetCodeBindingSource", "GET", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/language/{Language}/source",
        required=("Language", "RegistryName", "SchemaName"),
        raw_response=True,
    ),
    Operation("GetDiscoveredSchema", "POST", "/v1/discover"),
    Operation("GetResourcePolicy", "GET", "/v1/policy"),
    Operation("ListDiscoverers", "GET", "/v1/discoverers"),
    Operation("ListRegistries", "GET", "/v1/registries"),
    Operation(
        "ListSchemaVersions", "GET", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/versions",
    ),
    Operation("ListSchemas", "GET", "/v1/registries/name/{RegistryName}/schemas"),
    Operation("ListTagsForResource", "GET", "/tags/{ResourceArn}"),
    Operation(
        "PutCodeBinding", "POST", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}/language/{Language}",
        required=("Language", "RegistryName", "SchemaName"),
        query={"SchemaVersion": "schemaVersion"},
        body_members=False,
    ),
    Operation("PutResourcePolicy", "PUT", "/v1/policy", query={"RegistryName": "registryName"}),
    Operation(
        "SearchSchemas", "GET", "/v1/registries/name/{RegistryName}/schemas/search",
        required=("Keywords", "RegistryName"),
    ),
    Operation("StartDiscoverer", "POST", "/v1/discoverers/id/{DiscovererId}/start", body_members=False),
    Operation("StopDiscoverer", "POST", "/v1/discoverers/id/{DiscovererId}/stop", body_members=False),
    Operation("TagResource", "POST", "/tags/{ResourceArn}", body_names=("tags",)),
    Operation("UntagResource", "DELETE", "/tags/{ResourceArn}", required=("ResourceArn", "TagKeys")),
    Operation("UpdateDiscoverer", "PUT", "/v1/discoverers/id/{DiscovererId}"),
    Operation("UpdateRegistry", "PUT", "/v1/registries/name/{RegistryName}"),
    Operation("UpdateSchema", "PUT", "/v1/registries/name/{RegistryName}/schemas/name/{SchemaName}"),
]

MODEL = ServiceModel(
    service_id="schemas",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=PASCAL_CASE,
)


class SchemasClient(ServiceClient):
    """Client for schema registries, schemas, discoverers and code bindings."""
    model = MODEL


SchemasErrors = SchemasClient.errors

__getattr__ = request_class_getattr(SchemasClient, __name__)
