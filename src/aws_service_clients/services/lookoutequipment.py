"""
Amazon Lookout for Equipment client (JSON 1.0 protocol).
"""
from ..model import JSON, PASCAL_CASE, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "lookoutequipment"
API_VERSION = "2020-12-15"
TARGET_PREFIX = "AWSLookoutEquipmentFrontendService"

OPERATIONS = [
    Operation("CreateDataset", "POST", "/"),
    Operation("CreateInferenceScheduler", "POST", "/"),
    Operation("CreateLabel", "POST", "/"),
    Operation("CreateLabelGroup", "POST", "/"),
    Operation("CreateModel", "POST", "/"),
    Operation("DeleteDataset", "POST", "/"),
    Operation("DeleteInferenceScheduler", "POST", "/"),
    Operation("DeleteLabel", "POST", "/"),
    Operation("DeleteLabelGroup", "POST", "/"),
    Operation("DeleteModel", "POST", "/"),
    Operation("DescribeDataIngestionJob", "POST", "/"),
    Operation("DescribeDataset", "POST", "/"),
    Operation("DescribeInferenceScheduler", "POST", "/"),
    Operation("DescribeLabel", "POST", "/"),
    Operation("DescribeLabelGroup", "POST", "/"),
    Operation("DescribeModel", "POST", "/"),
    Operation("ListDataIngestionJobs", "POST", "/"),
    Operation("ListDatasets", "POST", "/"),
    Operation("ListInferenceEvents", "POST", "/"),
    Operation("ListInferenceExecutions", "POST", "/"),
    Operation("ListInferenceSchedulers", "POST", "/"),
    Operation("ListLabelGroups", "POST", "/"),
    Operation("ListLabels", "POST", "/"),
    Operation("ListModels", "POST", "/"),
    Operation("ListSensorStatistics", "POST", "/"),
    Operation("ListTagsForResource", "POST", "/"),
    Operation("StartDataIngestionJob", "POST", "/"),
    Operation("StartInferenceScheduler", "POST", "/"),
    Operation("StopInferenceScheduler", "POST", "/"),
    Operation("TagResource", "POST", "/"),
    Operation("UntagResource", "POST", "/"),
    Operation("UpdateInferenceScheduler", "POST", "/"),
    Operation("UpdateLabelGroup", "POST", "/"),
]

MODEL = ServiceModel(
    service_id="LookoutEquipment",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=STANDARD_ERRORS,
    body_casing=PASCAL_CASE,
    target_prefix=TARGET_PREFIX,
    json_version="1.0",
)


class LookoutEquipmentClient(ServiceClient):
    """Client for Lookout for Equipment datasets, models, labels and inference schedulers."""
    model = MODEL


LookoutEquipmentErrors = LookoutEquipmentClient.errors

__getattr__ = request_class_getattr(LookoutEquipmentClient, __name__)
