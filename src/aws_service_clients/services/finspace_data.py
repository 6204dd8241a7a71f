"""
Amazon FinSpace data client.
"""
from ..model import CAMEL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "finspace-api"
API_VERSION = "2020-07-13"

ERRORS = {name: code for name, code in STANDARD_ERRORS.items() if name != "ServiceQuotaExceededException"}
ERRORS["LimitExceededException"] = ("LIMIT_EXCEEDED", False)

OPERATIONS = [
    Operation(
        "AssociateUserToPermissionGroup", "POST", "/permission-group/{PermissionGroupId}/users/{UserId}",
    ),
    Operation("CreateChangeset", "POST", "/datasets/{DatasetId}/changesetsv2"),
    Operation("CreateDataView", "POST", "/datasets/{DatasetId}/dataviewsv2"),
    Operation("CreateDataset", "POST", "/datasetsv2"),
    Operation("CreatePermissionGroup", "POST", "/permission-group"),
    Operation("CreateUser", "POST", "/user"),
    Operation("DeleteDataset", "DELETE", "/datasetsv2/{DatasetId}"),
    Operation("DeletePermissionGroup", "DELETE", "/permission-group/{PermissionGroupId}"),
    Operation("DisableUser", "POST", "/user/{UserId}/disable"),
    Operation(
        "DisassociateUserFromPermissionGroup", "DELETE", "/permission-group/{PermissionGroupId}/users/{UserId}",
    ),
    Operation("EnableUser", "POST", "/user/{UserId}/enable"),
    Operation("GetChangeset", "GET", "/datasets/{DatasetId}/changesetsv2/{ChangesetId}"),
    Operation(
        "GetDataView", "GET", "/datasets/{DatasetId}/dataviewsv2/{DataViewId}",
        required=("DataViewId", "DatasetId"),
    ),
    Operation("GetDataset", "GET", "/datasetsv2/{DatasetId}"),
    Operation(
        "GetExternalDataViewAccessDetails", "POST", "/datasets/{DatasetId}/dataviewsv2/{DataViewId}/external-access-details",
        required=("DataViewId", "DatasetId"),
        body_members=False,
    ),
    Operation("GetPermissionGroup", "GET", "/permission-group/{PermissionGroupId}"),
    Operation(
        "GetProgrammaticAccessCredentials", "GET", "/credentials/programmatic",
        required=("EnvironmentId",),
    ),
    Operation("GetUser", "GET", "/user/{UserId}"),
    Operation("GetWorkingLocation", "POST", "/workingLocationV1"),
    Operation("ListChangesets", "GET", "/datasets/{DatasetId}/changesetsv2"),
    Operation("ListDataViews", "GET", "/datasets/{DatasetId}/dataviewsv2"),
    Operation("ListDatasets", "GET", "/datasetsv2"),
    Operation("ListPermissionGroups", "GET", "/permission-group", required=("MaxResults",)),
    Operation(
        "ListPermissionGroupsByUser", "GET", "/user/{UserId}/permission-groups",
        required=("UserId", "MaxResults"),
    ),
    Operation("ListUsers", "GET", "/user", required=("MaxResults",)),
    Operation(
        "ListUsersByPermissionGroup", "GET", "/permission-group/{PermissionGroupId}/users",
        required=("PermissionGroupId", "MaxResults"),
    ),
    Operation("ResetUserPassword", "POST", "/user/{UserId}/password"),
    Operation("UpdateChangeset", "PUT", "/datasets/{DatasetId}/changesetsv2/{ChangesetId}"),
    Operation("UpdateDataset", "PUT", "/datasetsv2/{DatasetId}"),
    Operation("UpdatePermissionGroup", "PUT", "/permission-group/{PermissionGroupId}"),
    Operation("UpdateUser", "PUT", "/user/{UserId}"),
]

MODEL = ServiceModel(
    service_id="finspace data",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=CAMEL_CASE,
)


class FinSpaceDataClient(ServiceClient):
    model = MODEL


FinSpaceDataErrors = FinSpaceDataClient.errors

__getattr__ = request_class_getattr(FinSpaceDataClient, __name__)
