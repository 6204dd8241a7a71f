"""
AWS WAFV2 client (JSON 1.1 protocol).

Top-level members with acronyms (WebACLArn, ResourceARN, ARN) carry their exact
names per operation. Other snake_case names are converted to PascalCase.
"""
from ..model import JSON, PASCAL_CASE, Operation, ServiceModel
from ..service_client import ServiceClient
from . import request_class_getattr

SERVICE_NAME = "wafv2"
API_VERSION = "2019-07-29"
TARGET_PREFIX = "AWSWAF_20190729"

ERRORS = {
    "WAFAssociatedItemException": ("WAF_ASSOCIATED_ITEM", False),
    "WAFConfigurationWarningException": ("WAF_CONFIGURATION_WARNING", False),
    "WAFDuplicateItemException": ("WAF_DUPLICATE_ITEM", False),
    "WAFExpiredManagedRuleGroupVersionException": ("WAF_EXPIRED_MANAGED_RULE_GROUP_VERSION", False),
    "WAFInternalErrorException": ("WAF_INTERNAL_ERROR", True),
    "WAFInvalidOperationException": ("WAF_INVALID_OPERATION", False),
    "WAFInvalidParameterException": ("WAF_INVALID_PARAMETER", False),
    "WAFInvalidPermissionPolicyException": ("WAF_INVALID_PERMISSION_POLICY", False),
    "WAFInvalidResourceException": ("WAF_INVALID_RESOURCE", False),
    "WAFLimitsExceededException": ("WAF_LIMITS_EXCEEDED", False),
    "WAFLogDestinationPermissionIssueException": ("WAF_LOG_DESTINATION_PERMISSION_ISSUE", False),
    "WAFNonexistentItemException": ("WAF_NONEXISTENT_ITEM", False),
    "WAFOptimisticLockException": ("WAF_OPTIMISTIC_LOCK", False),
    "WAFServiceLinkedRoleErrorException": ("WAF_SERVICE_LINKED_ROLE_ERROR", False),
    "WAFSubscriptionNotFoundException": ("WAF_SUBSCRIPTION_NOT_FOUND", False),
    "WAFTagOperationException": ("WAF_TAG_OPERATION", False),
    "WAFTagOperationInternalErrorException": ("WAF_TAG_OPERATION_INTERNAL_ERROR", True),
    "WAFUnavailableEntityException": ("WAF_UNAVAILABLE_ENTITY", False),
    "WAFUnsupportedAggregateKeyTypeException": ("WAF_UNSUPPORTED_AGGREGATE_KEY_TYPE", False),
}

OPERATIONS = [
    Operation("AssociateWebACL", "POST", "/", body_names=("WebACLArn",)),
    Operation("CheckCapacity", "POST", "/"),
    Operation("CreateIPSet", "POST", "/", body_names=("IPAddressVersion",)),
    Operation("CreateRegexPatternSet", "POST", "/"),
    Operation("CreateRuleGroup", "POST", "/"),
    Operation("CreateWebACL", "POST", "/"),
    Operation("DeleteFirewallManagerRuleGroups", "POST", "/", body_names=("WebACLArn", "WebACLLockToken")),
    Operation("DeleteIPSet", "POST", "/"),
    Operation("DeleteLoggingConfiguration", "POST", "/"),
    Operation("DeletePermissionPolicy", "POST", "/"),
    Operation("DeleteRegexPatternSet", "POST", "/"),
    Operation("DeleteRuleGroup", "POST", "/"),
    Operation("DeleteWebACL", "POST", "/"),
    Operation("DescribeManagedRuleGroup", "POST", "/"),
    Operation("DisassociateWebACL", "POST", "/"),
    Operation("GenerateMobileSdkReleaseUrl", "POST", "/"),
    Operation("GetIPSet", "POST", "/"),
    Operation("GetLoggingConfiguration", "POST", "/"),
    Operation("GetManagedRuleSet", "POST", "/"),
    Operation("GetMobileSdkRelease", "POST", "/"),
    Operation("GetPermissionPolicy", "POST", "/"),
    Operation("GetRateBasedStatementManagedKeys", "POST", "/", body_names=("WebACLId", "WebACLName")),
    Operation("GetRegexPatternSet", "POST", "/"),
    Operation("GetRuleGroup", "POST", "/", body_names=("ARN",)),
    Operation("GetSampledRequests", "POST", "/"),
    Operation("GetWebACL", "POST", "/", body_names=("ARN",)),
    Operation("GetWebACLForResource", "POST", "/"),
    Operation("ListAvailableManagedRuleGroupVersions", "POST", "/"),
    Operation("ListAvailableManagedRuleGroups", "POST", "/"),
    Operation("ListIPSets", "POST", "/"),
    Operation("ListLoggingConfigurations", "POST", "/"),
    Operation("ListManagedRuleSets", "POST", "/"),
    Operation("ListMobileSdkReleases", "POST", "/"),
    Operation("ListRegexPatternSets", "POST", "/"),
    Operation("ListResourcesForWebACL", "POST", "/", body_names=("WebACLArn",)),
    Operation("ListRuleGroups", "POST", "/"),
    Operation("ListTagsForResource", "POST", "/", body_names=("ResourceARN",)),
    Operation("ListWebACLs", "POST", "/"),
    Operation("PutLoggingConfiguration", "POST", "/"),
    Operation("PutManagedRuleSetVersions", "POST", "/"),
    Operation("PutPermissionPolicy", "POST", "/"),
    Operation("TagResource", "POST", "/", body_names=("ResourceARN",)),
    Operation("UntagResource", "POST", "/", body_names=("ResourceARN",)),
    Operation("UpdateIPSet", "POST", "/"),
    Operation("UpdateManagedRuleSetVersionExpiryDate", "POST", "/"),
    Operation("UpdateRegexPatternSet", "POST", "/"),
    Operation("UpdateRuleGroup", "POST", "/"),
    Operation("UpdateWebACL", "POST", "/"),
]

MODEL = ServiceModel(
    service_id="WAFV2",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=ERRORS,
    body_casing=PASCAL_CASE,
    target_prefix=TARGET_PREFIX,
    json_version="1.1",
)


class WAFV2Client(ServiceClient):
    """Client for web ACLs, rule groups, IP sets, regex pattern sets and managed rule sets."""
    model = MODEL


WAFV2Errors = WAFV2Client.errors

__getattr__ = request_class_getattr(WAFV2Client, __name__)
