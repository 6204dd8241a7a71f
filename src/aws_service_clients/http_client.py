"""
Pooled HTTP transport built on requests.
"""
import logging
from typing import Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict

logger = logging.getLogger(__name__)


class HttpResponse:
    """Status, headers and raw body of a completed HTTP exchange."""

    __slots__ = ("status_code", "headers", "body")

    def __init__(self, status_code: int, headers: Optional[Mapping[str, str]] = None, body: bytes = b""):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self.body = body or b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def __repr__(self) -> str:
        return f"HttpResponse(status_code={self.status_code}, body={len(self.body)} bytes)"


class HttpClient:
    """
    Sends signed requests through a shared requests.Session.

    Transport failures propagate as ``requests.RequestException``; the service
    client turns them into retryable NETWORK_CONNECTION errors.
    """

    def __init__(
        self,
        max_connections: int = 25,
        connect_timeout_ms: int = 1000,
        request_timeout_ms: int = 3000,
        proxy: Optional[str] = None,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = (connect_timeout_ms / 1000.0, request_timeout_ms / 1000.0)
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session or requests.Session()

        if self._owns_session:
            # Retries are driven by RetryStrategy, not urllib3.
            adapter = HTTPAdapter(pool_connections=max_connections, pool_maxsize=max_connections, max_retries=0)
            self.session.mount("https://", adapter)
            self.session.mount("http://", adapter)

        if user_agent:
            self.session.headers["User-Agent"] = user_agent

        if proxy:
            self.session.proxies.update({"http": proxy, "https": proxy})

    @classmethod
    def from_config(cls, config) -> "HttpClient":
        return cls(
            max_connections=config.max_connections,
            connect_timeout_ms=config.connect_timeout_ms,
            request_timeout_ms=config.request_timeout_ms,
            proxy=config.proxy,
            verify_ssl=config.verify_ssl,
            user_agent=config.user_agent,
        )

    def send(self, method: str, url: str, headers: Dict[str, str], body: Optional[bytes] = None) -> HttpResponse:
        """
        Send one HTTP request.

        Raises:
            requests.RequestException: On connection, timeout or TLS failures
        """
        response = self.session.request(
            method=method,
            url=url,
            headers=headers,
            data=body,
            timeout=self.timeout,
            verify=self.verify_ssl,
            allow_redirects=False,
        )
        return HttpResponse(response.status_code, response.headers, response.content)

    def close(self):
        if self._owns_session:
            self.session.close()
            logger.debug("HTTP session closed")
