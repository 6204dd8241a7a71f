"""
Shared fixtures: static credentials and a recording HTTP transport.
"""
import json
from collections import namedtuple

import pytest
from botocore.credentials import Credentials

from aws_service_clients.config import ClientConfiguration
from aws_service_clients.http_client import HttpResponse

SentRequest = namedtuple("SentRequest", ["method", "url", "headers", "body"])

TEST_ACCESS_KEY = "AKIDEXAMPLE"
TEST_SECRET_KEY = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"

INTEGRATION_MODULES = {
    "test_cli",
    "test_service_bindings",
    "test_service_client",
    "test_service_models",
    "test_services",
}


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.module.__name__.rsplit(".", 1)[-1] in INTEGRATION_MODULES:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


class FakeHttpClient:
    """Records every request and replays queued responses or exceptions."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = []
        self.closed = False

    def queue(self, status_code=200, body=None, headers=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        self.responses.append(HttpResponse(status_code, headers or {}, body or b""))
        return self

    def queue_error(self, exception):
        self.responses.append(exception)
        return self

    def send(self, method, url, headers, body=None):
        self.requests.append(SentRequest(method, url, dict(headers), body))
        if not self.responses:
            return HttpResponse(200, {"x-amzn-RequestId": "req-default"}, b"{}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last_request(self):
        return self.requests[-1]

    def header(self, name, index=-1):
        """Case-insensitive lookup of a header sent with a recorded request."""
        for key, value in self.requests[index].headers.items():
            if key.lower() == name.lower():
                return value
        return None


@pytest.fixture
def credentials():
    return Credentials(TEST_ACCESS_KEY, TEST_SECRET_KEY)


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def client_config():
    return ClientConfiguration(region="us-east-1", retry_scale_factor_ms=0)


@pytest.fixture
def make_client(credentials, http_client, client_config):
    """Build clients wired to the fake transport; they are closed after the test."""
    created = []

    def _make(client_class, config=None, **kwargs):
        kwargs.setdefault("credentials", credentials)
        kwargs.setdefault("http_client", http_client)
        client = client_class(config=config or client_config, **kwargs)
        created.append(client)
        return client

    yield _make

    for client in created:
        client.close()
