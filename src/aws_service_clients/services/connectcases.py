"""
Amazon Connect Cases client.
"""
from ..model import CAMEL_CASE, REST_JSON, Operation, ServiceModel
from ..service_client import ServiceClient
from . import STANDARD_ERRORS, request_class_getattr

SERVICE_NAME = "cases"
API_VERSION = "2022-10-03"

PAGE_QUERY = {"MaxResults": "maxResults", "NextToken": "nextToken"}

OPERATIONS = [
    Operation("BatchGetField", "POST", "/domains/{DomainId}/fields-batch"),
    Operation("BatchPutFieldOptions", "PUT", "/domains/{DomainId}/fields/{FieldId}/options"),
    Operation("CreateCase", "POST", "/domains/{DomainId}/cases"),
    Operation("CreateDomain", "POST", "/domains"),
    Operation("CreateField", "POST", "/domains/{DomainId}/fields"),
    Operation("CreateLayout", "POST", "/domains/{DomainId}/layouts"),
    Operation(
        "CreateRelatedItem", "POST", "/domains/{DomainId}/cases/{CaseId}/related-items/",
        required=("CaseId", "DomainId"),
    ),
    Operation("CreateTemplate", "POST", "/domains/{DomainId}/templates"),
    Operation("GetCase", "POST", "/domains/{DomainId}/cases/{CaseId}", required=("CaseId", "DomainId")),
    Operation("GetCaseEventConfiguration", "POST", "/domains/{DomainId}/case-event-configuration", body_members=False),
    Operation("GetDomain", "POST", "/domains/{DomainId}", body_members=False),
    Operation("GetLayout", "POST", "/domains/{DomainId}/layouts/{LayoutId}", body_members=False),
    Operation("GetTemplate", "POST", "/domains/{DomainId}/templates/{TemplateId}", body_members=False),
    Operation("ListCasesForContact", "POST", "/domains/{DomainId}/list-cases-for-contact"),
    Operation("ListDomains", "POST", "/domains-list", query=PAGE_QUERY, body_members=False),
    Operation(
        "ListFieldOptions", "POST", "/domains/{DomainId}/fields/{FieldId}/options-list",
        query=dict(PAGE_QUERY, Values="values"),
        body_members=False,
    ),
    Operation("ListFields", "POST", "/domains/{DomainId}/fields-list", query=PAGE_QUERY, body_members=False),
    Operation("ListLayouts", "POST", "/domains/{DomainId}/layouts-list", query=PAGE_QUERY, body_members=False),
    Operation("ListTagsForResource", "GET", "/tags/{Arn}"),
    Operation(
        "ListTemplates", "POST", "/domains/{DomainId}/templates-list",
        query=dict(PAGE_QUERY, Status="status"),
        body_members=False,
    ),
    Operation("PutCaseEventConfiguration", "PUT", "/domains/{DomainId}/case-event-configuration"),
    Operation("SearchCases", "POST", "/domains/{DomainId}/cases-search"),
    Operation(
        "SearchRelatedItems", "POST", "/domains/{DomainId}/cases/{CaseId}/related-items-search",
        required=("CaseId", "DomainId"),
    ),
    Operation("TagResource", "POST", "/tags/{Arn}"),
    Operation("UntagResource", "DELETE", "/tags/{Arn}", required=("Arn", "TagKeys")),
    Operation("UpdateCase", "PUT", "/domains/{DomainId}/cases/{CaseId}", required=("CaseId", "DomainId")),
    Operation("UpdateField", "PUT", "/domains/{DomainId}/fields/{FieldId}"),
    Operation("UpdateLayout", "PUT", "/domains/{DomainId}/layouts/{LayoutId}"),
    Operation("UpdateTemplate", "PUT", "/domains/{DomainId}/templates/{TemplateId}"),
]

MODEL = ServiceModel(
    service_id="ConnectCases",
    signing_name=SERVICE_NAME,
    endpoint_prefix=SERVICE_NAME,
    protocol=REST_JSON,
    api_version=API_VERSION,
    operations=OPERATIONS,
    errors=STANDARD_ERRORS,
    body_casing=CAMEL_CASE,
)


class ConnectCasesClient(ServiceClient):
    """Client for Amazon Connect Cases domains, fields, layouts, templates and cases."""
    model = MODEL


ConnectCasesErrors = ConnectCasesClient.errors

__getattr__ = request_class_getattr(ConnectCasesClient, __name__)
