"""
Catalogue tests run against every operation of every service client.
"""
import json
from urllib.parse import urlsplit

import pytest

import aws_service_clients
from aws_service_clients.model import JSON
from aws_service_clients.services import SERVICES, STANDARD_ERRORS, find_module, load_client_class

OPERATION_COUNTS = {
    "connectcases": 29,
    "finspace_data": 31,
    "glacier": 33,
    "iotsitewise": 73,
    "lookoutequipment": 33,
    "lookoutmetrics": 30,
    "resiliencehub": 39,
    "schemas": 31,
    "ssm_incidents": 29,
    "wafv2": 48,
}

ACCOUNT_ID = "123456789012"


def _value(member):
    return ACCOUNT_ID if member == "AccountId" else f"{member.lower()}-1"


def _operation_params(only_required=False):
    params = []
    for module_name in sorted(SERVICES):
        client_class = load_client_class(module_name)
        for operation in client_class.model.operations:
            if only_required and not operation.required:
                continue
            params.append(pytest.param(client_class, operation, id=f"{module_name}.{operation.name}"))
    return params


class TestCatalogue:
    """Test the service table."""

    def test_operation_counts(self):
        counts = {name: len(load_client_class(name).model.operations) for name in SERVICES}

        assert counts == OPERATION_COUNTS
        assert sum(counts.values()) == 376

    @pytest.mark.parametrize("module_name", sorted(SERVICES))
    def test_service_identity(self, module_name):
        class_name, service_id, signing_name = SERVICES[module_name]
        client_class = load_client_class(module_name)
        model = client_class.model

        assert client_class.__name__ == class_name
        assert model.service_id == service_id
        assert model.signing_name == signing_name
        assert model.endpoint_prefix == signing_name
        assert len(model.api_version) == 10
        assert len(set(model.operation_names)) == len(model.operations)
        for code_name, _ in model.errors.values():
            assert code_name in client_class.errors.__members__

    @pytest.mark.parametrize("name, module_name", [
        ("cases", "connectcases"),
        ("ConnectCases", "connectcases"),
        ("ConnectCasesClient", "connectcases"),
        ("finspace-api", "finspace_data"),
        ("finspace data", "finspace_data"),
        ("FinSpaceData", "finspace_data"),
        ("ssm-incidents", "ssm_incidents"),
        ("SSM Incidents", "ssm_incidents"),
        ("IoTSiteWise", "iotsitewise"),
        ("wafv2", "wafv2"),
    ])
    def test_find_module(self, name, module_name):
        assert find_module(name) == module_name

    def test_unknown_service(self):
        with pytest.raises(KeyError):
            find_module("s3")

    def test_package_exports_client_classes(self):
        from aws_service_clients import GlacierClient
        from aws_service_clients.services.glacier import GlacierClient as module_class

        assert GlacierClient is module_class
        assert "WAFV2Client" in aws_service_clients.__all__
        with pytest.raises(AttributeError):
            aws_service_clients.S3Client

    def test_shared_error_table_not_mutated(self):
        assert "TooManyRequestsException" not in STANDARD_ERRORS
        assert "LimitExceededException" not in STANDARD_ERRORS
        assert "ServiceQuotaExceededException" in STANDARD_ERRORS


@pytest.mark.parametrize("client_class, operation", _operation_params(only_required=True))
def test_each_required_field_is_checked(make_client, http_client, client_class, operation):
    client = make_client(client_class)

    for missing in operation.required:
        members = {name: _value(name) for name in operation.required if name != missing}
        outcome = client.make_request(operation, client.new_request(operation.name, **members))

        assert outcome.error.error_type is client.errors.MISSING_PARAMETER
        assert outcome.error.exception_name == "MISSING_PARAMETER"
        assert outcome.error.message == f"Missing required field [{missing}]"
        assert not outcome.error.retryable

    assert http_client.requests == []


@pytest.mark.parametrize("client_class, operation", _operation_params())
def test_operation_dispatch(make_client, http_client, client_class, operation):
    client = make_client(client_class)
    members = {name: _value(name) for name in list(operation.required) + operation.path_members}

    outcome = getattr(client, operation.method_name)(**members)

    assert outcome.is_success, outcome.error
    sent = http_client.last_request
    url = urlsplit(sent.url)
    model = client_class.model

    expected_path = operation.path
    for member in operation.path_members:
        expected_path = expected_path.replace(f"{{{member}}}", _value(member))

    assert sent.method == operation.http_method
    assert url.path == expected_path
    assert url.hostname == f"{operation.host_prefix or ''}{model.endpoint_prefix}.us-east-1.amazonaws.com"
    assert f"/us-east-1/{model.signing_name}/aws4_request" in http_client.header("Authorization")

    if model.protocol == JSON:
        assert http_client.header("X-Amz-Target") == f"{model.target_prefix}.{operation.name}"
        assert http_client.header("Content-Type") == f"application/x-amz-json-{model.json_version}"
        assert json.loads(sent.body) == members
    elif operation.has_body and not operation.payload and operation.body_members:
        assert isinstance(json.loads(sent.body), dict)
    elif not operation.payload:
        assert not sent.body
        assert http_client.header("Content-Type") is None
