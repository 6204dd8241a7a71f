"""
AWS IoT SiteWise client.

Operations are split across the api., data. and monitor. host prefixes.
"""
from ..model import CAMEL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import request_class_getattr

SERVICE_NAME = "iotsitewise"
API_VERSION = "2019-12-02"

ERRORS = {
    "AccessDeniedException": ("ACCESS_DENIED", False),
    "ConflictingOperationException": ("CONFLICTING_OPERATION", False),
    "InternalFailureException": ("INTERNAL_FAILURE", True),
    "InvalidRequestException": ("INVALID_REQUEST", False),
    "LimitExceededException": ("LIMIT_EXCEEDED", False),
    "PreconditionFailedException": ("PRECONDITION_FAILED", False),
    "QueryTimeoutException": ("QUERY_TIMEOUT", False),
    "ResourceAlreadyExistsException": ("RESOURCE_ALREADY_EXISTS", False),
    "ResourceNotFoundException": ("RESOURCE_NOT_FOUND", False),
    "ServiceUnavailableException": ("SERVICE_UNAVAILABLE", True),
    "ThrottlingException": ("THROTTLING", True),
    "TooManyTagsException": ("TOO_MANY_TAGS", False),
    "UnauthorizedException": ("UNAUTHORIZED", False),
    "ValidationException": ("VALIDATION", False),
}

ASSET_MODEL_VERSION_HEADERS = {
    "IfMatch": "If-Match",
    "IfNoneMatch": "If-None-Match",
    "MatchForVersionType": "Match-For-Version-Type",
}

OPERATIONS = [
    Operation("AssociateAssets", "POST", "/assets/{AssetId}/associate", host_prefix="api."),
    Operation(
        "AssociateTimeSeriesToAssetProperty", "POST", "/timeseries/associate/",
        required=("Alias", "AssetId", "PropertyId"),
        query={"Alias": "alias", "AssetId": "assetId", "PropertyId": "propertyId"},
        host_prefix="api.",
    ),
    Operation(
        "BatchAssociateProjectAssets", "POST", "/projects/{ProjectId}/assets/associate",
        host_prefix="monitor.",
    ),
    Operation(
        "BatchDisassociateProjectAssets", "POST", "/projects/{ProjectId}/assets/disassociate",
        host_prefix="monitor.",
    ),
    Operation("BatchGetAssetPropertyAggregates", "POST", "/properties/batch/aggregates", host_prefix="data."),
    Operation("BatchGetAssetPropertyValue", "POST", "/properties/batch/latest", host_prefix="data."),
    Operation("BatchGetAssetPropertyValueHistory", "POST", "/properties/batch/history", host_prefix="data."),
    Operation("BatchPutAssetPropertyValue", "POST", "/properties", host_prefix="data."),
    Operation("CreateAccessPolicy", "POST", "/access-policies", host_prefix="monitor."),
    Operation("CreateAsset", "POST", "/assets", host_prefix="api."),
    Operation("CreateAssetModel", "POST", "/asset-models", host_prefix="api."),
    Operation("CreateBulkImportJob", "POST", "/jobs", host_prefix="data."),
    Operation("CreateDashboard", "POST", "/dashboards", host_prefix="monitor."),
    Operation("CreateGateway", "POST", "/20200301/gateways", host_prefix="api."),
    Operation("CreatePortal", "POST", "/portals", host_prefix="monitor."),
    Operation("CreateProject", "POST", "/projects", host_prefix="monitor."),
    Operation("DeleteAccessPolicy", "DELETE", "/access-policies/{AccessPolicyId}", host_prefix="monitor."),
    Operation("DeleteAsset", "DELETE", "/assets/{AssetId}", host_prefix="api."),
    Operation(
        "DeleteAssetModel", "DELETE", "/asset-models/{AssetModelId}",
        headers=ASSET_MODEL_VERSION_HEADERS,
        host_prefix="api.",
    ),
    Operation("DeleteDashboard", "DELETE", "/dashboards/{DashboardId}", host_prefix="monitor."),
    Operation("DeleteGateway", "DELETE", "/20200301/gateways/{GatewayId}", host_prefix="api."),
    Operation("DeletePortal", "DELETE", "/portals/{PortalId}", host_prefix="monitor."),
    Operation("DeleteProject", "DELETE", "/projects/{ProjectId}", host_prefix="monitor."),
    Operation(
        "DeleteTimeSeries", "POST", "/timeseries/delete/",
        query={
            "Alias": "alias",
            "AssetId": "assetId",
            "PropertyId": "propertyId",
            "WorkspaceName": "workspaceName",
        },
        host_prefix="api.",
    ),
    Operation("DescribeAccessPolicy", "GET", "/access-policies/{AccessPolicyId}", host_prefix="monitor."),
    Operation("DescribeAsset", "GET", "/assets/{AssetId}", host_prefix="api."),
    Operation("DescribeAssetModel", "GET", "/asset-models/{AssetModelId}", host_prefix="api."),
    Operation(
        "DescribeAssetProperty", "GET", "/assets/{AssetId}/properties/{PropertyId}",
        host_prefix="api.",
    ),
    Operation("DescribeBulkImportJob", "GET", "/jobs/{JobId}", host_prefix="data."),
    Operation("DescribeDashboard", "GET", "/dashboards/{DashboardId}", host_prefix="monitor."),
    Operation(
        "DescribeDefaultEncryptionConfiguration", "GET", "/configuration/account/encryption",
        host_prefix="api.",
    ),
    Operation("DescribeGateway", "GET", "/20200301/gateways/{GatewayId}", host_prefix="api."),
    Operation(
        "DescribeGatewayCapabilityConfiguration", "GET", "/20200301/gateways/{GatewayId}/capability/{CapabilityNamespace}",
        host_prefix="api.",
    ),
    Operation("DescribeLoggingOptions", "GET", "/logging", host_prefix="api."),
    Operation("DescribePortal", "GET", "/portals/{PortalId}", host_prefix="monitor."),
    Operation("DescribeProject", "GET", "/projects/{ProjectId}", host_prefix="monitor."),
    Operation("DescribeStorageConfiguration", "GET", "/configuration/account/storage", host_prefix="api."),
    Operation("DescribeTimeSeries", "GET", "/timeseries/describe/", host_prefix="api."),
    Operation("DisassociateAssets", "POST", "/assets/{AssetId}/disassociate", host_prefix="api."),
    Operation(
        "DisassociateTimeSeriesFromAssetProperty", "POST", "/timeseries/disassociate/",
        required=("Alias", "AssetId", "PropertyId"),
        query={"Alias": "alias", "AssetId": "assetId", "PropertyId": "propertyId"},
        host_prefix="api.",
    ),
    Operation(
        "GetAssetPropertyAggregates", "GET", "/properties/aggregates",
        required=("AggregateTypes", "Resolution", "StartDate", "EndDate"),
        host_prefix="data.",
    ),
    Operation("GetAssetPropertyValue", "GET", "/properties/latest", host_prefix="data."),
    Operation("GetAssetPropertyValueHistory", "GET", "/properties/history", host_prefix="data."),
    Operation(
        "GetInterpolatedAssetPropertyValues", "GET", "/properties/interpolated",
        required=("StartTimeInSeconds", "EndTimeInSeconds", "Quality", "IntervalInSeconds", "Type"),
        host_prefix="data.",
    ),
    Operation("ListAccessPolicies", "GET", "/access-policies", host_prefix="monitor."),
    Operation(
        "ListAssetModelProperties", "GET", "/asset-models/{AssetModelId}/properties",
        host_prefix="api.",
    ),
    Operation("ListAssetModels", "GET", "/asset-models", host_prefix="api."),
    Operation("ListAssetProperties", "GET", "/assets/{AssetId}/properties", host_prefix="api."),
    Operation(
        "ListAssetRelationships", "GET", "/assets/{AssetId}/assetRelationships",
        required=("AssetId", "TraversalType"),
        host_prefix="api.",
    ),
    Operation("ListAssets", "GET", "/assets", host_prefix="api."),
    Operation("ListAssociatedAssets", "GET", "/assets/{AssetId}/hierarchies", host_prefix="api."),
    Operation("ListBulkImportJobs", "GET", "/jobs", host_prefix="data."),
    Operation("ListDashboards", "GET", "/dashboards", required=("ProjectId",), host_prefix="monitor."),
    Operation("ListGateways", "GET", "/20200301/gateways", host_prefix="api."),
    Operation("ListPortals", "GET", "/portals", host_prefix="monitor."),
    Operation("ListProjectAssets", "GET", "/projects/{ProjectId}/assets", host_prefix="monitor."),
    Operation("ListProjects", "GET", "/projects", required=("PortalId",), host_prefix="monitor."),
    Operation("ListTagsForResource", "GET", "/tags", required=("ResourceArn",), host_prefix="api."),
    Operation("ListTimeSeries", "GET", "/timeseries/", host_prefix="api."),
    Operation(
        "PutDefaultEncryptionConfiguration", "POST", "/configuration/account/encryption",
        host_prefix="api.",
    ),
    Operation("PutLoggingOptions", "PUT", "/logging", host_prefix="api."),
    Operation("PutStorageConfiguration", "POST", "/configuration/account/storage", host_prefix="api."),
    Operation(
        "TagResource", "POST", "/tags",
        required=("ResourceArn",),
        query={"ResourceArn": "resourceArn"},
        host_prefix="api.",
    ),
    Operation("UntagResource", "DELETE", "/tags", required=("ResourceArn", "TagKeys"), host_prefix="api."),
    Operation("UpdateAccessPolicy", "PUT", "/access-policies/{AccessPolicyId}", host_prefix="monitor."),
    Operation("UpdateAsset", "PUT", "/assets/{AssetId}", host_prefix="api."),
    Operation(
        "UpdateAssetModel", "PUT", "/asset-models/{AssetModelId}",
        headers=ASSET_MODEL_VERSION_HEADERS,
        host_prefix="api.",
    ),
    Operation("UpdateAssetProperty", "PUT", "/assets/{AssetId}/properties/{PropertyId}", host_prefix="api."),
    Operation("UpdateDashboard", "PUT", "/dashboards/{DashboardId}", host_prefix="monitor."),
    Operation("UpdateGateway", "PUT", "/20200301/gateways/{GatewayId}", host_prefix="api."),
    Operation(
        "UpdateGatewayCapabilityConfiguration", "POST", "/20200301/gateways/{GatewayId}/capability",
        host_prefix="api.",
    ),
    Operation("UpdatePortal", "PUT", "/portals/{PortalId}", host_prefix="monitor."),
    Operation("UpdateProject", "PUT", "/projects/{ProjectId}", host_prefix="monitor."),
]

MODEL = ServiceModel(
    service_id="IoTSiteWise",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=CAMEL_CASE,
)


class IoTSiteWiseClient(ServiceClient):
    model = MODEL


IoTSiteWiseErrors = IoTSiteWiseClient.errors

__getattr__ = request_class_getattr(IoTSiteWiseClient, __name__)
