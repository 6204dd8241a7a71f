"""
Client configuration shared by every service client.
"""
import logging
import os
import platform
from concurrent.futures import Executor
from typing import Any, Dict, Optional

from .config_validator import ConfigValidator
from .error_handler import ConfigurationError
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
DEFAULT_USER_AGENT = f"aws-service-clients/{__version__} python/{platform.python_version()}"

TRUE_VALUES = ("1", "true", "yes", "on")


def get_aws_region() -> str:
    """Get AWS region from environment."""
    return (
        os.environ.get("AWS_REGION")
        or os.environ.get("REGION")
        or os.environ.get("AWS_DEFAULT_REGION")
        or DEFAULT_REGION
    )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUE_VALUES


class ClientConfiguration:
    """
    Settings for endpoint resolution, transport, retries and the async executor.

    Dictionary configuration uses the same camelCase layout as JSON config files:

        {
            "region": "eu-west-1",
            "endpointOverride": "https://localhost:4566",
            "useFips": false,
            "useDualStack": false,
            "timeouts": {"connectTimeoutMs": 1000, "requestTimeoutMs": 3000},
            "retries": {"maxAttempts": 3, "scaleFactorMs": 25, "maxBackoffMs": 20000},
            "http": {"maxConnections": 25, "proxy": null, "verifySsl": true},
            "executor": {"maxWorkers": 8},
            "signing": {"enabled": true}
        }
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_override: Optional[str] = None,
        scheme: str = "https",
        use_fips: bool = False,
        use_dual_stack: bool = False,
        connect_timeout_ms: int = 1000,
        request_timeout_ms: int = 3000,
        max_connections: int = 25,
        max_attempts: int = 3,
        retry_scale_factor_ms: float = 25,
        max_backoff_ms: float = 20000,
        executor: Optional[Executor] = None,
        executor_max_workers: int = 8,
        proxy: Optional[str] = None,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        signing: Optional[Dict[str, Any]] = None,
    ):
        self.region = region or get_aws_region()
        self.endpoint_override = endpoint_override
        self.scheme = scheme
        self.use_fips = use_fips
        self.use_dual_stack = use_dual_stack
        self.connect_timeout_ms = connect_timeout_ms
        self.request_timeout_ms = request_timeout_ms
        self.max_connections = max_connections
        self.max_attempts = max_attempts
        self.retry_scale_factor_ms = retry_scale_factor_ms
        self.max_backoff_ms = max_backoff_ms
        self.executor = executor
        self.executor_max_workers = executor_max_workers
        self.proxy = proxy
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.signing = dict(signing or {})

        logger.debug(f"Client configuration initialized: region={self.region}")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ClientConfiguration":
        """
        Build a configuration from a camelCase dictionary.

        Raises:
            ConfigurationError: If the dictionary fails validation
        """
        validator = ConfigValidator()
        is_valid, errors, warnings = validator.validate(config)
        for warning in warnings:
            logger.warning(f"Client configuration: {warning}")
        if not is_valid:
            raise ConfigurationError(
                "Invalid client configuration: " + "; ".join(errors),
                context={"errors": errors}
            )

        timeouts = config.get("timeouts", {})
        retries = config.get("retries", {})
        http = config.get("http", {})
        executor = config.get("executor", {})

        return cls(
            region=config.get("region"),
            endpoint_override=config.get("endpointOverride"),
            scheme=config.get("scheme", "https"),
            use_fips=config.get("useFips", False),
            use_dual_stack=config.get("useDualStack", False),
            connect_timeout_ms=timeouts.get("connectTimeoutMs", 1000),
            request_timeout_ms=timeouts.get("requestTimeoutMs", 3000),
            max_connections=http.get("maxConnections", 25),
            max_attempts=retries.get("maxAttempts", 3),
            retry_scale_factor_ms=retries.get("scaleFactorMs", 25),
            max_backoff_ms=retries.get("maxBackoffMs", 20000),
            executor_max_workers=executor.get("maxWorkers", 8),
            proxy=http.get("proxy"),
            verify_ssl=http.get("verifySsl", True),
            user_agent=http.get("userAgent"),
            signing=config.get("signing"),
        )

    @classmethod
    def from_file(cls, config_path: str) -> "ClientConfiguration":
        """
        Load and validate a JSON configuration file.

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        validator = ConfigValidator(config_path)
        is_valid, errors, _ = validator.validate_all()
        if not is_valid:
            raise ConfigurationError(
                f"Invalid client configuration in {config_path}: " + "; ".join(errors),
                context={"errors": errors, "config_path": config_path}
            )
        return cls.from_dict(validator.config)

    @classmethod
    def from_environment(cls, **overrides) -> "ClientConfiguration":
        """Build a configuration from AWS_* environment variables, then apply overrides."""
        settings: Dict[str, Any] = {
            "region": get_aws_region(),
            "endpoint_override": os.environ.get("AWS_ENDPOINT_URL") or None,
            "use_fips": _env_flag("AWS_USE_FIPS_ENDPOINT"),
            "use_dual_stack": _env_flag("AWS_USE_DUALSTACK_ENDPOINT"),
        }

        max_attempts = os.environ.get("AWS_MAX_ATTEMPTS")
        if max_attempts:
            try:
                settings["max_attempts"] = int(max_attempts)
            except ValueError as e:
                raise ConfigurationError(
                    f"AWS_MAX_ATTEMPTS must be an integer, got {max_attempts!r}", original_error=e
                )

        settings.update(overrides)
        return cls(**settings)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration in its camelCase dictionary form."""
        return {
            "region": self.region,
            "endpointOverride": self.endpoint_override,
            "scheme": self.scheme,
            "useFips": self.use_fips,
            "useDualStack": self.use_dual_stack,
            "timeouts": {
                "connectTimeoutMs": self.connect_timeout_ms,
                "requestTimeoutMs": self.request_timeout_ms,
            },
            "retries": {
                "maxAttempts": self.max_attempts,
                "scaleFactorMs": self.retry_scale_factor_ms,
                "maxBackoffMs": self.max_backoff_ms,
            },
            "http": {
                "maxConnections": self.max_connections,
                "proxy": self.proxy,
                "verifySsl": self.verify_ssl,
                "userAgent": self.user_agent,
            },
            "executor": {"maxWorkers": self.executor_max_workers},
            "signing": dict(self.signing),
        }

    def __repr__(self) -> str:
        return (
            f"ClientConfiguration(region={self.region!r}, "
            f"endpoint_override={self.endpoint_override!r}, "
            f"use_fips={self.use_fips}, use_dual_stack={self.use_dual_stack})"
        )
