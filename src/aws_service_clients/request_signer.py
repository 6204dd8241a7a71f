"""
AWS request signing utilities with SigV4 implementation.
"""
import logging
import threading
from typing import Any, Callable, Dict, Optional, Union
from urllib.parse import urlsplit

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError

from .error_handler import SigningError

logger = logging.getLogger(__name__)

SIGV4_SIGNER = "SIGV4"
NULL_SIGNER = "NULL"

CredentialsSource = Union[Credentials, Callable[[], Optional[Credentials]], None]


class SigningConfig:
    """Configuration for AWS request signing."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize signing configuration.

        Args:
            config: Configuration dictionary
        """
        config = config or {}
        self.enabled = config.get('enabled', True)
        self.signature_version = config.get('signatureVersion', 'v4')
        self.exclude_services = list(config.get('excludeServices', []))
        self.require_https = config.get('requireHttps', True)
        self.log_signing_events = config.get('logSigningEvents', False)

        logger.debug(f"Signing configuration initialized: enabled={self.enabled}")

    def signer_for(self, service_name: str) -> str:
        """Return the signer name used for a service."""
        if not self.enabled or service_name in self.exclude_services:
            return NULL_SIGNER
        return SIGV4_SIGNER


class RequestSigner:
    """
    AWS request signer with SigV4 support.

    Credentials come from, in order: explicit Credentials, a provider callable,
    or the default boto3 credential chain. Resolved credentials are reused
    until they are refreshed by botocore.
    """

    def __init__(
        self,
        config: Optional[SigningConfig] = None,
        credentials: CredentialsSource = None,
    ):
        """
        Initialize request signer.

        Args:
            config: Signing configuration
            credentials: Credentials object or zero-argument callable returning one
        """
        self.config = config or SigningConfig()
        self._credentials = credentials if isinstance(credentials, Credentials) else None
        self._provider = credentials if callable(credentials) and not isinstance(credentials, Credentials) else None
        self._cache_lock = threading.RLock()

        logger.debug("Request signer initialized")

    def _get_credentials(self) -> Credentials:
        """
        Get AWS credentials for signing.

        Returns:
            AWS credentials

        Raises:
            NoCredentialsError: If credentials cannot be found
        """
        with self._cache_lock:
            if self._credentials is not None:
                return self._credentials

            if self._provider is not None:
                credentials = self._provider()
            else:
                credentials = boto3.Session().get_credentials()

            if not credentials:
                logger.error("No AWS credentials available for request signing")
                raise NoCredentialsError()

            if self._provider is None:
                self._credentials = credentials
            return credentials

    def sign_request(
        self,
        request: AWSRequest,
        service: str,
        region: str,
        signer_name: str = SIGV4_SIGNER
    ) -> AWSRequest:
        """
        Sign an AWSRequest in place with SigV4.

        Args:
            request: Request to sign
            service: Signing name of the service
            region: Signing region
            signer_name: SIGV4 or NULL

        Returns:
            The signed request

        Raises:
            NoCredentialsError: If credentials cannot be found
            SigningError: If the request cannot be signed
        """
        if signer_name == NULL_SIGNER or not self.config.enabled:
            return request

        if self.config.require_https and urlsplit(request.url).scheme != "https":
            raise SigningError(
                f"Refusing to sign request over insecure transport: {request.url}",
                context={"service": service}
            )

        credentials = self._get_credentials()
        frozen = credentials.get_frozen_credentials() if hasattr(credentials, "get_frozen_credentials") else credentials

        try:
            SigV4Auth(frozen, service, region).add_auth(request)
        except (TypeError, ValueError) as e:
            raise SigningError(f"Failed to sign request: {e}", original_error=e, context={"service": service})

        if self.config.log_signing_events:
            logger.debug(f"Signed request for {service} in {region}")

        return request
