"""
AWS Systems Manager Incident Manager client.
"""
from ..model import CAMEL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "ssm-incidents"
API_VERSION = "2018-05-10"

OPERATIONS = [
    Operation("CreateReplicationSet", "POST", "/createReplicationSet"),
    Operation("CreateResponsePlan", "POST", "/createResponsePlan"),
    Operation("CreateTimelineEvent", "POST", "/createTimelineEvent"),
    Operation("DeleteIncidentRecord", "POST", "/deleteIncidentRecord"),
    Operation(
        "DeleteReplicationSet", "POST", "/deleteReplicationSet",
        required=("Arn",),
        query={"Arn": "arn"},
        body_members=False,
    ),
    Operation("DeleteResourcePolicy", "POST", "/deleteResourcePolicy"),
    Operation("DeleteResponsePlan", "POST", "/deleteResponsePlan"),
    Operation("DeleteTimelineEvent", "POST", "/deleteTimelineEvent"),
    Operation("GetIncidentRecord", "GET", "/getIncidentRecord", required=("Arn",)),
    Operation("GetReplicationSet", "GET", "/getReplicationSet", required=("Arn",)),
    Operation(
        "GetResourcePolicies", "POST", "/getResourcePolicies",
        required=("ResourceArn",),
        query={"ResourceArn": "resourceArn"},
    ),
    Operation("GetResponsePlan", "GET", "/getResponsePlan", required=("Arn",)),
    Operation("GetTimelineEvent", "GET", "/getTimelineEvent", required=("EventId", "IncidentRecordArn")),
    Operation("ListIncidentRecords", "POST", "/listIncidentRecords"),
    Operation("ListRelatedItems", "POST", "/listRelatedItems"),
    Operation("ListReplicationSets", "POST", "/listReplicationSets"),
    Operation("ListResponsePlans", "POST", "/listResponsePlans"),
    Operation("ListTagsForResource", "GET", "/tags/{ResourceArn}"),
    Operation("ListTimelineEvents", "POST", "/listTimelineEvents"),
    Operation("PutResourcePolicy", "POST", "/putResourcePolicy"),
    Operation("StartIncident", "POST", "/startIncident"),
    Operation("TagResource", "POST", "/tags/{ResourceArn}"),
    Operation("UntagResource", "DELETE", "/tags/{ResourceArn}", required=("ResourceArn", "TagKeys")),
    Operation("UpdateDeletionProtection", "POST", "/updateDeletionProtection"),
    Operation("UpdateIncidentRecord", "POST", "/updateIncidentRecord"),
    Operation("UpdateRelatedItems", "POST", "/updateRelatedItems"),
    Operation("UpdateReplicationSet", "POST", "/updateReplicationSet"),
    Operation("UpdateResponsePlan", "POST", "/updateResponsePlan"),
    Operation("UpdateTimelineEvent", "POST", "/updateTimelineEvent"),
]

MODEL = ServiceModel(
    service_id="SSM Incidents",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=STANDARD_ERRORS,
    body_casing=CAMEL_CASE,
)


class SSMIncidentsClient(ServiceClient):
    model = MODEL


SSMIncidentsErrors = SSMIncidentsClient.errors

__getattr__ = request_class_getattr(SSMIncidentsClient, __name__)
