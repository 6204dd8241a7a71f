"""
Amazon Lookout for Metrics client.
"""
from ..model import PASCAL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "lookoutmetrics"
API_VERSION = "2017-07-25"

ERRORS = dict(STANDARD_ERRORS)
ERRORS["TooManyRequestsException"] = ("TOO_MANY_REQUESTS", True)

OPERATIONS = [
    Operation("ActivateAnomalyDetector", "POST", "/ActivateAnomalyDetector"),
    Operation("BackTestAnomalyDetector", "POST", "/BackTestAnomalyDetector"),
    Operation("CreateAlert", "POST", "/CreateAlert"),
    Operation("CreateAnomalyDetector", "POST", "/CreateAnomalyDetector"),
    Operation("CreateMetricSet", "POST", "/CreateMetricSet"),
    Operation("DeactivateAnomalyDetector", "POST", "/DeactivateAnomalyDetector"),
    Operation("DeleteAlert", "POST", "/DeleteAlert"),
    Operation("DeleteAnomalyDetector", "POST", "/DeleteAnomalyDetector"),
    Operation("DescribeAlert", "POST", "/DescribeAlert"),
    Operation("DescribeAnomalyDetectionExecutions", "POST", "/DescribeAnomalyDetectionExecutions"),
    Operation("DescribeAnomalyDetector", "POST", "/DescribeAnomalyDetector"),
    Operation("DescribeMetricSet", "POST", "/DescribeMetricSet"),
    Operation("DetectMetricSetConfig", "POST", "/DetectMetricSetConfig"),
    Operation("GetAnomalyGroup", "POST", "/GetAnomalyGroup"),
    Operation("GetDataQualityMetrics", "POST", "/GetDataQualityMetrics"),
    Operation("GetFeedback", "POST", "/GetFeedback"),
    Operation("GetSampleData", "POST", "/GetSampleData"),
    Operation("ListAlerts", "POST", "/ListAlerts"),
    Operation("ListAnomalyDetectors", "POST", "/ListAnomalyDetectors"),
    Operation("ListAnomalyGroupRelatedMetrics", "POST", "/ListAnomalyGroupRelatedMetrics"),
    Operation("ListAnomalyGroupSummaries", "POST", "/ListAnomalyGroupSummaries"),
    Operation("ListAnomalyGroupTimeSeries", "POST", "/ListAnomalyGroupTimeSeries"),
    Operation("ListMetricSets", "POST", "/ListMetricSets"),
    Operation("ListTagsForResource", "GET", "/tags/{ResourceArn}"),
    Operation("PutFeedback", "POST", "/PutFeedback"),
    Operation("TagResource", "POST", "/tags/{ResourceArn}", body_names=("tags",)),
    Operation(
        "UntagResource", "DELETE", "/tags/{ResourceArn}",
        required=("ResourceArn", "TagKeys"),
        query={"TagKeys": "tagKeys"},
    ),
    Operation("UpdateAlert", "POST", "/UpdateAlert"),
    Operation("UpdateAnomalyDetector", "POST", "/UpdateAnomalyDetector"),
    Operation("UpdateMetricSet", "POST", "/UpdateMetricSet"),
]

MODEL = ServiceModel(
    service_id="LookoutMetrics",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=PASCAL_CASE,
)


class LookoutMetricsClient(ServiceClient):
    model = MODEL


LookoutMetricsErrors = LookoutMetricsClient.errors

__getattr__ = request_class_getattr(LookoutMetricsClient, __name__)
