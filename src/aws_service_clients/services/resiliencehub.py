"""
AWS Resilience Hub client.
"""
from ..model import CAMEL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "resiliencehub"
API_VERSION = "2020-04-30"

OPERATIONS = [
    Operation("AddDraftAppVersionResourceMappings", "POST", "/add-draft-app-version-resource-mappings"),
    Operation("CreateApp", "POST", "/create-app"),
    Operation("CreateRecommendationTemplate", "POST", "/create-recommendation-template"),
    Operation("CreateResiliencyPolicy", "POST", "/create-resiliency-policy"),
    Operation("DeleteApp", "POST", "/delete-app"),
    Operation("DeleteAppAssessment", "POST", "/delete-app-assessment"),
    Operation("DeleteRecommendationTemplate", "POST", "/delete-recommendation-template"),
    Operation("DeleteResiliencyPolicy", "POST", "/delete-resiliency-policy"),
    Operation("DescribeApp", "POST", "/describe-app"),
    Operation("DescribeAppAssessment", "POST", "/describe-app-assessment"),
    Operation(
        "DescribeAppVersionResourcesResolutionStatus", "POST", "/describe-app-version-resources-resolution-status",
    ),
    Operation("DescribeAppVersionTemplate", "POST", "/describe-app-version-template"),
    Operation(
        "DescribeDraftAppVersionResourcesImportStatus", "POST", "/describe-draft-app-version-resources-import-status",
    ),
    Operation("DescribeResiliencyPolicy", "POST", "/describe-resiliency-policy"),
    Operation("ImportResourcesToDraftAppVersion", "POST", "/import-resources-to-draft-app-version"),
    Operation("ListAlarmRecommendations", "POST", "/list-alarm-recommendations"),
    Operation("ListAppAssessments", "GET", "/list-app-assessments"),
    Operation("ListAppComponentCompliances", "POST", "/list-app-component-compliances"),
    Operation("ListAppComponentRecommendations", "POST", "/list-app-component-recommendations"),
    Operation("ListAppVersionResourceMappings", "POST", "/list-app-version-resource-mappings"),
    Operation("ListAppVersionResources", "POST", "/list-app-version-resources"),
    Operation("ListAppVersions", "POST", "/list-app-versions"),
    Operation("ListApps", "GET", "/list-apps"),
    Operation(
        "ListRecommendationTemplates", "GET", "/list-recommendation-templates",
        required=("AssessmentArn",),
    ),
    Operation("ListResiliencyPolicies", "GET", "/list-resiliency-policies"),
    Operation("ListSopRecommendations", "POST", "/list-sop-recommendations"),
    Operation("ListSuggestedResiliencyPolicies", "GET", "/list-suggested-resiliency-policies"),
    Operation("ListTagsForResource", "GET", "/tags/{ResourceArn}"),
    Operation("ListTestRecommendations", "POST", "/list-test-recommendations"),
    Operation("ListUnsupportedAppVersionResources", "POST", "/list-unsupported-app-version-resources"),
    Operation("PublishAppVersion", "POST", "/publish-app-version"),
    Operation("PutDraftAppVersionTemplate", "POST", "/put-draft-app-version-template"),
    Operation("RemoveDraftAppVersionResourceMappings", "POST", "/remove-draft-app-version-resource-mappings"),
    Operation("ResolveAppVersionResources", "POST", "/resolve-app-version-resources"),
    Operation("StartAppAssessment", "POST", "/start-app-assessment"),
    Operation("TagResource", "POST", "/tags/{ResourceArn}"),
    Operation("UntagResource", "DELETE", "/tags/{ResourceArn}", required=("ResourceArn", "TagKeys")),
    Operation("UpdateApp", "POST", "/update-app"),
    Operation("UpdateResiliencyPolicy", "POST", "/update-resiliency-policy"),
]

MODEL = ServiceModel(
    service_id="resiliencehub",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=STANDARD_ERRORS,
    body_casing=CAMEL_CASE,
)


class ResilienceHubClient(ServiceClient):
    """Client for Resilience Hub applications, assessments, policies and recommendations."""
    model = MODEL


ResilienceHubErrors = ResilienceHubClient.errors

__getattr__ = request_class_getattr(ResilienceHubClient, __name__)
