"""
Service specific bindings: Glacier checksums and account ids, host prefixes,
declared query members and JSON protocol targets.
"""
import io
import json
from urllib.parse import parse_qs, urlsplit

import pytest
from botocore.utils import calculate_sha256, calculate_tree_hash

from aws_service_clients.config import ClientConfiguration
from aws_service_clients.services import glacier, iotsitewise, schemas, wafv2
from aws_service_clients.services.connectcases import ConnectCasesClient
from aws_service_clients.services.glacier import GlacierClient, GlacierErrors, add_glacier_checksums
from aws_service_clients.services.iotsitewise import IoTSiteWiseClient
from aws_service_clients.services.lookoutequipment import LookoutEquipmentClient
from aws_service_clients.services.lookoutmetrics import LookoutMetricsClient, LookoutMetricsErrors
from aws_service_clients.services.schemas import SchemasClient
from aws_service_clients.services.ssm_incidents import SSMIncidentsClient
from aws_service_clients.services.wafv2 import WAFV2Client, WAFV2Errors

ACCOUNT_ID = "123456789012"


def _query(url):
    return parse_qs(urlsplit(url).query)


class TestGlacier:
    """Test Glacier account ids, headers and checksums."""

    @pytest.mark.parametrize("account_id", ["-", "12345", "1234567890123", "abcdefghijkl"])
    def test_invalid_account_id(self, make_client, http_client, account_id):
        client = make_client(GlacierClient)

        outcome = client.describe_vault(account_id=account_id, vault_name="photos")

        assert outcome.error.error_type is GlacierErrors.INVALID_PARAMETER_VALUE
        assert outcome.error.exception_name == "INVALID_PARAMETER"
        assert outcome.error.message == "AccountId is invalid"
        assert http_client.requests == []

    def test_api_version_header(self, make_client, http_client):
        client = make_client(GlacierClient)

        client.list_vaults(account_id=ACCOUNT_ID, limit="10")

        assert http_client.header("x-amz-glacier-version") == "2012-06-01"
        assert _query(http_client.last_request.url) == {"limit": ["10"]}

    def test_upload_archive_checksums(self, make_client, http_client):
        http_client.queue(201, headers={
            "Location": f"/{ACCOUNT_ID}/vaults/photos/archives/a-1",
            "x-amz-archive-id": "a-1",
            "x-amz-sha256-tree-hash": "hash",
        })
        client = make_client(GlacierClient)

        outcome = client.upload_archive(account_id=ACCOUNT_ID, vault_name="photos", body=b"archive")

        assert outcome.is_success
        assert outcome.result.archive_id == "a-1"
        assert outcome.result.checksum == "hash"
        assert http_client.last_request.body == b"archive"
        assert http_client.header("x-amz-sha256-tree-hash") == calculate_tree_hash(io.BytesIO(b"archive"))
        assert http_client.header("x-amz-content-sha256") == calculate_sha256(io.BytesIO(b"archive"), as_hex=True)

    def test_caller_checksum_kept(self):
        headers = add_glacier_checksums({"x-amz-sha256-tree-hash": "mine"}, b"part")

        assert headers["x-amz-sha256-tree-hash"] == "mine"
        assert "x-amz-content-sha256" in headers

    def test_checksums_only_for_uploads(self, make_client, http_client):
        client = make_client(GlacierClient)

        client.create_vault(account_id=ACCOUNT_ID, vault_name="photos")

        assert http_client.header("x-amz-sha256-tree-hash") is None

    def test_get_job_output_returns_raw_body(self, make_client, http_client):
        http_client.queue(206, b"\x00\x01archive", {"x-amz-sha256-tree-hash": "abc", "Content-Range": "bytes 0-9/10"})
        client = make_client(GlacierClient)

        outcome = client.get_job_output(account_id=ACCOUNT_ID, vault_name="photos", job_id="j-1", range="bytes=0-9")

        assert outcome.result.body == b"\x00\x01archive"
        assert outcome.result.checksum == "abc"
        assert outcome.result.content_range == "bytes 0-9/10"
        assert http_client.header("Range") == "bytes=0-9"

    def test_list_jobs_status_code_query(self, make_client, http_client):
        client = make_client(GlacierClient)

        client.list_jobs(account_id=ACCOUNT_ID, vault_name="photos", statuscode="InProgress", completed="false")

        assert _query(http_client.last_request.url) == {"statuscode": ["InProgress"], "completed": ["false"]}

    def test_tag_operations_use_static_query(self, make_client, http_client):
        client = make_client(GlacierClient)

        client.add_tags_to_vault(account_id=ACCOUNT_ID, vault_name="photos", tags={"team": "media"})
        client.remove_tags_from_vault(account_id=ACCOUNT_ID, vault_name="photos", tag_keys=["team"])

        assert _query(http_client.requests[0].url) == {"operation": ["add"]}
        assert json.loads(http_client.requests[0].body) == {"Tags": {"team": "media"}}
        assert _query(http_client.requests[1].url) == {"operation": ["remove"]}
        assert json.loads(http_client.requests[1].body) == {"TagKeys": ["team"]}

    def test_complete_vault_lock_sends_no_body(self, make_client, http_client):
        client = make_client(GlacierClient)

        outcome = client.complete_vault_lock(account_id=ACCOUNT_ID, vault_name="photos", lock_id="lock-1")

        sent = http_client.last_request
        assert outcome.is_success
        assert sent.method == "POST"
        assert not sent.body
        assert http_client.header("Content-Type") is None

    def test_list_jobs_paging_query(self, make_client, http_client):
        client = make_client(GlacierClient)

        client.list_jobs(account_id=ACCOUNT_ID, vault_name="photos", limit=50, marker="m-1")

        assert _query(http_client.last_request.url) == {"limit": ["50"], "marker": ["m-1"]}

    def test_request_class_from_module(self):
        request = glacier.InitiateJobRequest(account_id=ACCOUNT_ID, vault_name="photos")

        assert request.operation.name == "InitiateJob"
        assert type(request).__module__ == glacier.__name__
        with pytest.raises(AttributeError):
            glacier.PutBucketRequest


class TestIoTSiteWise:
    """Test host prefixed endpoints."""

    @pytest.mark.parametrize("method, members, host", [
        ("describe_asset", {"asset_id": "a-1"}, "api.iotsitewise.us-east-1.amazonaws.com"),
        ("batch_put_asset_property_value", {"entries": []}, "data.iotsitewise.us-east-1.amazonaws.com"),
        ("create_project", {"portal_id": "p-1", "project_name": "plant"}, "monitor.iotsitewise.us-east-1.amazonaws.com"),
    ])
    def test_host_prefix(self, make_client, http_client, method, members, host):
        client = make_client(IoTSiteWiseClient)

        outcome = getattr(client, method)(**members)

        assert outcome.is_success
        assert urlsplit(http_client.last_request.url).hostname == host

    def test_host_prefix_with_endpoint_override(self, make_client, http_client):
        client = make_client(IoTSiteWiseClient)
        client.override_endpoint("https://localhost:8443")

        client.describe_asset(asset_id="a-1")

        assert http_client.last_request.url == "https://api.localhost:8443/assets/a-1"

    def test_tag_resource_query(self, make_client, http_client):
        client = make_client(IoTSiteWiseClient)

        client.tag_resource(resource_arn="arn:aws:iotsitewise:us-east-1:1:asset/a-1", tags={"k": "v"})

        sent = http_client.last_request
        assert urlsplit(sent.url).path == "/tags"
        assert _query(sent.url) == {"resourceArn": ["arn:aws:iotsitewise:us-east-1:1:asset/a-1"]}
        assert json.loads(sent.body) == {"tags": {"k": "v"}}

    def test_asset_model_version_headers(self, make_client, http_client):
        client = make_client(IoTSiteWiseClient)

        client.update_asset_model(asset_model_id="m-1", asset_model_name="pump", if_match="etag-1")

        assert http_client.header("If-Match") == "etag-1"
        assert json.loads(http_client.last_request.body) == {"assetModelName": "pump"}

    def test_delete_time_series_query(self, make_client, http_client):
        client = make_client(IoTSiteWiseClient)

        client.delete_time_series(alias="/plant/temp", workspace_name="ws", client_token="tok")

        sent = http_client.last_request
        assert _query(sent.url) == {"alias": ["/plant/temp"], "workspaceName": ["ws"]}
        assert json.loads(sent.body) == {"clientToken": "tok"}

    def test_module_request_class(self):
        assert iotsitewise.DescribeAssetRequest.operation.host_prefix == "api."


class TestConnectCases:
    """Test list operations that page through the query string."""

    def test_list_domains_paging_query(self, make_client, http_client):
        client = make_client(ConnectCasesClient)

        outcome = client.list_domains(max_results=5, next_token="tok")

        sent = http_client.last_request
        assert outcome.is_success
        assert sent.method == "POST"
        assert urlsplit(sent.url).path == "/domains-list"
        assert _query(sent.url) == {"maxResults": ["5"], "nextToken": ["tok"]}
        assert not sent.body

    def test_list_field_options_values(self, make_client, http_client):
        client = make_client(ConnectCasesClient)

        client.list_field_options(domain_id="d-1", field_id="f-1", values=["open", "closed"], max_results=10)

        assert _query(http_client.last_request.url) == {"values": ["open", "closed"], "maxResults": ["10"]}

    def test_list_templates_status(self, make_client, http_client):
        client = make_client(ConnectCasesClient)

        client.list_templates(domain_id="d-1", status=["Active"])

        assert _query(http_client.last_request.url) == {"status": ["Active"]}


class TestSSMIncidents:
    """Test query bound members on POST operations."""

    def test_delete_replication_set(self, make_client, http_client):
        client = make_client(SSMIncidentsClient)

        outcome = client.delete_replication_set(arn="arn:aws:ssm-incidents::1:replication-set/r")

        sent = http_client.last_request
        assert outcome.is_success
        assert sent.method == "POST"
        assert urlsplit(sent.url).path == "/deleteReplicationSet"
        assert _query(sent.url) == {"arn": ["arn:aws:ssm-incidents::1:replication-set/r"]}
        assert not sent.body
        assert "ssm-incidents.us-east-1.amazonaws.com" in sent.url


class TestSchemas:
    """Test Pascal case bodies and raw responses."""

    def test_code_binding_source_is_raw(self, make_client, http_client):
        http_client.queue(200, b"PK\x03\x04zip", {"Content-Type": "application/octet-stream"})
        client = make_client(SchemasClient)

        outcome = client.get_code_binding_source(registry_name="r", schema_name="s", language="Python36")

        assert outcome.result.body == b"PK\x03\x04zip"
        assert urlsplit(http_client.last_request.url).path == (
            "/v1/registries/name/r/schemas/name/s/language/Python36/source"
        )

    def test_put_resource_policy(self, make_client, http_client):
        client = make_client(SchemasClient)

        client.put_resource_policy(policy="{}", registry_name="r")

        sent = http_client.last_request
        assert sent.method == "PUT"
        assert _query(sent.url) == {"registryName": ["r"]}
        assert json.loads(sent.body) == {"Policy": "{}"}

    def test_tags_member_is_lower_case(self, make_client, http_client):
        client = make_client(SchemasClient)

        client.create_registry(registry_name="r", description="events", tags={"team": "ops"})

        assert json.loads(http_client.last_request.body) == {"Description": "events", "tags": {"team": "ops"}}

    def test_start_discoverer_sends_no_body(self, make_client, http_client):
        client = make_client(SchemasClient)

        client.start_discoverer(discoverer_id="d-1")

        assert not http_client.last_request.body
        assert http_client.header("Content-Type") is None

    def test_module_request_class(self):
        assert schemas.PutCodeBindingRequest.operation.query == {"SchemaVersion": "schemaVersion"}


class TestWAFV2:
    """Test the JSON 1.1 protocol."""

    def test_verbatim_acronym_members(self, make_client, http_client):
        client = make_client(WAFV2Client)

        client.list_tags_for_resource(ResourceARN="arn:aws:wafv2:us-east-1:1:regional/webacl/a", limit=5)

        assert http_client.header("X-Amz-Target") == "AWSWAF_20190729.ListTagsForResource"
        assert json.loads(http_client.last_request.body) == {
            "ResourceARN": "arn:aws:wafv2:us-east-1:1:regional/webacl/a",
            "Limit": 5,
        }

    def test_acronym_members_from_snake_case(self, make_client, http_client):
        client = make_client(WAFV2Client)

        client.associate_web_acl(web_acl_arn="arn:waf", resource_arn="arn:alb")
        client.list_tags_for_resource(resource_arn="arn:waf")
        client.get_web_acl(arn="arn:waf")
        client.create_ip_set(name="blocked", scope="REGIONAL", ip_address_version="IPV4", addresses=[])

        assert json.loads(http_client.requests[0].body) == {"WebACLArn": "arn:waf", "ResourceArn": "arn:alb"}
        assert json.loads(http_client.requests[1].body) == {"ResourceARN": "arn:waf"}
        assert json.loads(http_client.requests[2].body) == {"ARN": "arn:waf"}
        assert json.loads(http_client.requests[3].body) == {
            "Name": "blocked",
            "Scope": "REGIONAL",
            "IPAddressVersion": "IPV4",
            "Addresses": [],
        }

    def test_miscased_acronym_member_uses_modeled_name(self, make_client, http_client):
        client = make_client(WAFV2Client)
        request = client.new_request("AssociateWebACL", WebAclArn="arn:waf", ResourceArn="arn:alb")

        client.make_request("AssociateWebACL", request)

        assert request.is_set("WebACLArn")
        assert json.loads(http_client.last_request.body) == {"WebACLArn": "arn:waf", "ResourceArn": "arn:alb"}

    def test_modeled_error(self, make_client, http_client):
        http_client.queue(400, {"__type": "WAFNonexistentItemException", "Message": "no such web ACL"})
        client = make_client(WAFV2Client)

        outcome = client.get_web_acl(Name="acl", Scope="REGIONAL", Id="1")

        assert outcome.error.error_type is WAFV2Errors.WAF_NONEXISTENT_ITEM
        assert outcome.error.message == "no such web ACL"
        assert WAFV2Errors.WAF_NONEXISTENT_ITEM.value >= 129

    def test_module_errors_alias(self):
        assert wafv2.WAFV2Errors is WAFV2Client.errors


class TestLookoutEquipment:
    """Test the JSON 1.0 protocol."""

    def test_content_type_and_target(self, make_client, http_client):
        client = make_client(LookoutEquipmentClient)

        client.describe_dataset(dataset_name="pumps")

        assert http_client.header("Content-Type") == "application/x-amz-json-1.0"
        assert http_client.header("X-Amz-Target") == "AWSLookoutEquipmentFrontendService.DescribeDataset"
        assert json.loads(http_client.last_request.body) == {"DatasetName": "pumps"}


class TestLookoutMetrics:
    """Test the service specific throttling error."""

    def test_too_many_requests_is_retryable(self, make_client, http_client):
        http_client.queue(429, {"message": "slow down"}, {"x-amzn-ErrorType": "TooManyRequestsException"})
        client = make_client(LookoutMetricsClient, config=ClientConfiguration(region="us-east-1", max_attempts=1))

        outcome = client.list_anomaly_detectors()

        assert outcome.error.error_type is LookoutMetricsErrors.TOO_MANY_REQUESTS
        assert outcome.error.retryable
        assert len(http_client.requests) == 1
