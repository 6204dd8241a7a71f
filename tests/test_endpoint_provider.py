"""
Tests for endpoint_provider - partition based endpoint resolution.
"""
import pytest

from aws_service_clients.config import ClientConfiguration
from aws_service_clients.endpoint_provider import (
    Endpoint,
    EndpointProvider,
    compute_signer_region,
    find_partition,
    is_valid_host,
)
from aws_service_clients.error_handler import EndpointResolutionError


def _resolve(prefix="cases", **config):
    provider = EndpointProvider(prefix)
    provider.init_built_in_parameters(ClientConfiguration(**config))
    return provider.resolve_endpoint().url


class TestEndpointResolution:
    """Test region to URL resolution."""

    def test_standard_region(self):
        assert _resolve(region="us-west-2") == "https://cases.us-west-2.amazonaws.com/"

    def test_fips_endpoint(self):
        assert _resolve(region="us-east-1", use_fips=True) == "https://cases-fips.us-east-1.amazonaws.com/"

    def test_fips_region_name_implies_fips(self):
        assert _resolve(region="fips-us-east-1") == "https://cases-fips.us-east-1.amazonaws.com/"
        assert _resolve(region="us-east-1-fips") == "https://cases-fips.us-east-1.amazonaws.com/"

    def test_dual_stack_endpoint(self):
        assert _resolve(prefix="wafv2", region="eu-west-1", use_dual_stack=True) == "https://wafv2.eu-west-1.api.aws/"

    def test_china_partition(self):
        assert _resolve(prefix="glacier", region="cn-north-1") == "https://glacier.cn-north-1.amazonaws.com.cn/"
        assert (
            _resolve(prefix="glacier", region="cn-north-1", use_dual_stack=True)
            == "https://glacier.cn-north-1.api.amazonwebservices.com.cn/"
        )

    def test_gov_cloud_partition(self):
        assert (
            _resolve(prefix="ssm-incidents", region="us-gov-west-1", use_fips=True)
            == "https://ssm-incidents-fips.us-gov-west-1.amazonaws.com/"
        )

    def test_iso_partitions(self):
        assert _resolve(region="us-iso-east-1") == "https://cases.us-iso-east-1.c2s.ic.gov/"
        assert _resolve(region="us-isob-east-1") == "https://cases.us-isob-east-1.sc2s.sgov.gov/"

    def test_dual_stack_unsupported_in_iso(self):
        with pytest.raises(EndpointResolutionError) as exc_info:
            _resolve(region="us-iso-east-1", use_dual_stack=True)

        assert "DualStack" in exc_info.value.message

    def test_missing_region(self):
        provider = EndpointProvider("cases")

        with pytest.raises(EndpointResolutionError) as exc_info:
            provider.resolve_endpoint()

        assert exc_info.value.message == "Invalid Configuration: Missing Region"

    def test_invalid_region(self):
        with pytest.raises(EndpointResolutionError):
            _resolve(region="us east 1")

    def test_unknown_region_uses_aws_partition(self):
        assert find_partition("xx-space-1")["id"] == "aws"
        assert find_partition("cn-northwest-1")["id"] == "aws-cn"

    def test_override_wins(self):
        provider = EndpointProvider("cases")
        provider.init_built_in_parameters(ClientConfiguration(region="us-east-1", use_fips=True))
        provider.override_endpoint("localhost:4566")

        assert provider.endpoint_override == "https://localhost:4566"
        assert provider.resolve_endpoint().url == "https://localhost:4566/"

    def test_override_from_configuration(self):
        url = _resolve(region="us-east-1", endpoint_override="http://127.0.0.1:8080/base")

        assert url == "http://127.0.0.1:8080/base"

    def test_resolution_is_cached(self):
        provider = EndpointProvider("cases")
        provider.init_built_in_parameters(ClientConfiguration(region="us-east-1"))

        first = provider.resolve_endpoint()
        first.add_path_segment("extended")
        second = provider.resolve_endpoint()

        assert len(provider._cache) == 1
        assert second.url == "https://cases.us-east-1.amazonaws.com/"


class TestSignerRegion:
    """Test signing region computation."""

    def test_strips_fips_markers(self):
        assert compute_signer_region("fips-us-west-2") == "us-west-2"
        assert compute_signer_region("us-west-2-fips") == "us-west-2"

    def test_global_maps_to_us_east_1(self):
        assert compute_signer_region("aws-global") == "us-east-1"

    def test_plain_region_unchanged(self):
        assert compute_signer_region("ap-southeast-2") == "ap-southeast-2"


class TestEndpoint:
    """Test endpoint extension."""

    def setup_method(self):
        self.endpoint = Endpoint("https://cases.us-east-1.amazonaws.com")

    def test_path_segments_are_percent_encoded(self):
        self.endpoint.add_path_segments("/domains/")
        self.endpoint.add_path_segment("a b/c")
        self.endpoint.add_path_segment("x:y@z")

        assert self.endpoint.path == "/domains/a%20b%2Fc/x:y@z"

    def test_trailing_slash_preserved(self):
        self.endpoint.add_path_segments("/domains/")
        self.endpoint.add_path_segment("d-1")
        self.endpoint.add_path_segments("/related-items/")

        assert self.endpoint.url == "https://cases.us-east-1.amazonaws.com/domains/d-1/related-items/"

    def test_query_parameters_append_to_static_query(self):
        self.endpoint.set_query_string("?operation=add")
        self.endpoint.add_query_parameters([("tagKeys", "a b"), ("tagKeys", "c")])

        assert self.endpoint.url == "https://cases.us-east-1.amazonaws.com/?operation=add&tagKeys=a%20b&tagKeys=c"

    def test_host_prefix_added_once(self):
        endpoint = Endpoint("https://iotsitewise.us-east-1.amazonaws.com")

        assert endpoint.add_prefix_if_missing("data.") is None
        assert endpoint.add_prefix_if_missing("data.") is None
        assert endpoint.host == "data.iotsitewise.us-east-1.amazonaws.com"

    def test_invalid_host_prefix_rejected(self):
        error = self.endpoint.add_prefix_if_missing("bad_label.")

        assert error is not None
        assert self.endpoint.host == "cases.us-east-1.amazonaws.com"

    def test_is_valid_host(self):
        assert is_valid_host("api.iotsitewise.us-east-1.amazonaws.com")
        assert is_valid_host("localhost:4566")
        assert not is_valid_host("-bad.example.com")
        assert not is_valid_host("")
