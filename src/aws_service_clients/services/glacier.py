"""
Amazon S3 Glacier client.

Every operation carries the account id as its first path segment. The account
id must be the 12 digit id of the vault owner.
"""
import io
import logging
from typing import Dict, Optional

from botocore.utils import calculate_sha256, calculate_tree_hash

from ..model import PASCAL_CASE, REST_JSON, Operation, ServiceModel, ServiceRequest
from ..service_client import ServiceClient
from . import request_class_getattr

logger = logging.getLogger(__name__)

SERVICE_NAME = "glacier"
API_VERSION = "2012-06-01"

ERRORS = {
    "InsufficientCapacityException": ("INSUFFICIENT_CAPACITY", False),
    "InvalidParameterValueException": ("INVALID_PARAMETER_VALUE", False),
    "LimitExceededException": ("LIMIT_EXCEEDED", False),
    "MissingParameterValueException": ("MISSING_PARAMETER_VALUE", False),
    "PolicyEnforcedException": ("POLICY_ENFORCED", False),
    "RequestTimeoutException": ("REQUEST_TIMEOUT", True),
    "ResourceNotFoundException": ("RESOURCE_NOT_FOUND", False),
    "ServiceUnavailableException": ("SERVICE_UNAVAILABLE", True),
}

VAULT = "/{AccountId}/vaults/{VaultName}"

ARCHIVE_RESULT_HEADERS = {
    "Location": "location",
    "x-amz-sha256-tree-hash": "checksum",
    "x-amz-archive-id": "archiveId",
}

CHECKSUM_OPERATIONS = frozenset({"UploadArchive", "UploadMultipartPart"})

PAGE_QUERY = {"Limit": "limit", "Marker": "marker"}


def _operation(name, method, path, **kwargs):
    return Operation(name, method, path, validate_account_id=True, **kwargs)


OPERATIONS = [
    _operation("AbortMultipartUpload", "DELETE", VAULT + "/multipart-uploads/{UploadId}"),
    _operation("AbortVaultLock", "DELETE", VAULT + "/lock-policy"),
    _operation("AddTagsToVault", "POST", VAULT + "/tags", static_query="operation=add"),
    _operation(
        "CompleteMultipartUpload", "POST", VAULT + "/multipart-uploads/{UploadId}",
        headers={"ArchiveSize": "x-amz-archive-size", "Checksum": "x-amz-sha256-tree-hash"},
        result_headers=ARCHIVE_RESULT_HEADERS,
        body_members=False,
    ),
    _operation("CompleteVaultLock", "POST", VAULT + "/lock-policy/{LockId}", body_members=False),
    _operation("CreateVault", "PUT", VAULT, result_headers={"Location": "location"}, body_members=False),
    _operation("DeleteArchive", "DELETE", VAULT + "/archives/{ArchiveId}"),
    _operation("DeleteVault", "DELETE", VAULT),
    _operation("DeleteVaultAccessPolicy", "DELETE", VAULT + "/access-policy"),
    _operation("DeleteVaultNotifications", "DELETE", VAULT + "/notification-configuration"),
    _operation("DescribeJob", "GET", VAULT + "/jobs/{JobId}"),
    _operation("DescribeVault", "GET", VAULT),
    _operation("GetDataRetrievalPolicy", "GET", "/{AccountId}/policies/data-retrieval"),
    _operation(
        "GetJobOutput", "GET", VAULT + "/jobs/{JobId}/output",
        headers={"Range": "Range"},
        result_headers={
            "x-amz-sha256-tree-hash": "checksum",
            "Content-Range": "contentRange",
            "Accept-Ranges": "acceptRanges",
            "Content-Type": "contentType",
            "x-amz-archive-description": "archiveDescription",
        },
        raw_response=True,
    ),
    _operation("GetVaultAccessPolicy", "GET", VAULT + "/access-policy", result_payload="policy"),
    _operation("GetVaultLock", "GET", VAULT + "/lock-policy"),
    _operation(
        "GetVaultNotifications", "GET", VAULT + "/notification-configuration",
        result_payload="vaultNotificationConfig",
    ),
    _operation(
        "InitiateJob", "POST", VAULT + "/jobs",
        payload="JobParameters",
        result_headers={
            "Location": "location",
            "x-amz-job-id": "jobId",
            "x-amz-job-output-path": "jobOutputPath",
        },
    ),
    _operation(
        "InitiateMultipartUpload", "POST", VAULT + "/multipart-uploads",
        headers={"ArchiveDescription": "x-amz-archive-description", "PartSize": "x-amz-part-size"},
        result_headers={"Location": "location", "x-amz-multipart-upload-id": "uploadId"},
        body_members=False,
    ),
    _operation(
        "InitiateVaultLock", "POST", VAULT + "/lock-policy",
        payload="Policy",
        result_headers={"x-amz-lock-id": "lockId"},
    ),
    _operation(
        "ListJobs", "GET", VAULT + "/jobs",
        query=dict(PAGE_QUERY, Statuscode="statuscode", Completed="completed"),
    ),
    _operation("ListMultipartUploads", "GET", VAULT + "/multipart-uploads", query=PAGE_QUERY),
    _operation("ListParts", "GET", VAULT + "/multipart-uploads/{UploadId}", query=PAGE_QUERY),
    _operation("ListProvisionedCapacity", "GET", "/{AccountId}/provisioned-capacity"),
    _operation("ListTagsForVault", "GET", VAULT + "/tags"),
    _operation("ListVaults", "GET", "/{AccountId}/vaults", query=PAGE_QUERY),
    _operation(
        "PurchaseProvisionedCapacity", "POST", "/{AccountId}/provisioned-capacity",
        result_headers={"x-amz-capacity-id": "capacityId"},
        body_members=False,
    ),
    _operation("RemoveTagsFromVault", "POST", VAULT + "/tags", static_query="operation=remove"),
    _operation("SetDataRetrievalPolicy", "PUT", "/{AccountId}/policies/data-retrieval"),
    _operation("SetVaultAccessPolicy", "PUT", VAULT + "/access-policy", payload="Policy"),
    _operation(
        "SetVaultNotifications", "PUT", VAULT + "/notification-configuration",
        payload="VaultNotificationConfig",
    ),
    _operation(
        "UploadArchive", "POST", VAULT + "/archives",
        required=("VaultName", "AccountId"),
        headers={"ArchiveDescription": "x-amz-archive-description", "Checksum": "x-amz-sha256-tree-hash"},
        payload="Body",
        result_headers=ARCHIVE_RESULT_HEADERS,
    ),
    _operation(
        "UploadMultipartPart", "PUT", VAULT + "/multipart-uploads/{UploadId}",
        headers={"Checksum": "x-amz-sha256-tree-hash", "Range": "Content-Range"},
        payload="Body",
        result_headers={"x-amz-sha256-tree-hash": "checksum"},
    ),
]

MODEL = ServiceModel(
    service_id="Glacier",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=PASCAL_CASE,
    default_headers={"x-amz-glacier-version": API_VERSION},
)


def add_glacier_checksums(headers: Dict[str, str], body: Optional[bytes]) -> Dict[str, str]:
    """
    Add the x-amz-content-sha256 and x-amz-sha256-tree-hash headers for an upload body.

    Headers already present are left untouched.
    """
    present = {name.lower() for name in headers}
    payload = io.BytesIO(body or b"")
    if "x-amz-content-sha256" not in present:
        headers["x-amz-content-sha256"] = calculate_sha256(payload, as_hex=True)
        payload.seek(0)
    if "x-amz-sha256-tree-hash" not in present:
        headers["x-amz-sha256-tree-hash"] = calculate_tree_hash(payload)
    return headers


class GlacierClient(ServiceClient):
    """Client for Glacier vaults, archives, jobs and multipart uploads."""
    model = MODEL

    def customize_request(
        self,
        operation: Operation,
        request: ServiceRequest,
        headers: Dict[str, str],
        body: Optional[bytes]
    ) -> Dict[str, str]:
        if operation.name in CHECKSUM_OPERATIONS:
            headers = add_glacier_checksums(dict(headers), body)
            logger.debug(f"{operation.name}: tree hash {headers['x-amz-sha256-tree-hash']}")
        return headers


GlacierErrors = GlacierClient.errors

__getattr__ = request_class_getattr(GlacierClient, __name__)
