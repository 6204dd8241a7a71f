"""
Configuration validation utilities for service client configuration files.
"""
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

REGION_PATTERN = re.compile(r'^[a-z]{2}(-[a-z]+)+-\d+$')


class ConfigValidator:
    """Validator for JSON client configuration files."""

    def __init__(self, config_path: str = "aws_clients.json"):
        self.config_path = config_path
        self.config = {}
        self.errors = []
        self.warnings = []

    def load_config(self) -> bool:
        """Load configuration from file."""
        try:
            config_file = Path(self.config_path)
            if not config_file.exists():
                self.errors.append(f"Configuration file {self.config_path} not found")
                return False

            with open(config_file, 'r') as f:
                self.config = json.load(f)

            if not isinstance(self.config, dict):
                self.errors.append(f"Configuration in {self.config_path} must be a JSON object")
                return False

            return True
        except json.JSONDecodeError as e:
            self.errors.append(f"Invalid JSON in {self.config_path}: {e}")
            return False
        except OSError as e:
            self.errors.append(f"Error loading configuration: {e}")
            return False

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """
        Load and validate all configuration sections.

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        if not self.load_config():
            return False, self.errors, self.warnings

        return self.validate(self.config)

    def validate(self, config: Dict[str, Any]) -> Tuple[bool, List[str], List[str]]:
        """
        Validate an already loaded configuration dictionary.

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        self.config = config
        self._validate_region()
        self._validate_endpoint()
        self._validate_timeouts()
        self._validate_retries()
        self._validate_http()
        self._validate_executor()
        self._validate_signing()

        is_valid = len(self.errors) == 0
        return is_valid, self.errors, self.warnings

    def _validate_region(self):
        """Validate AWS region configuration."""
        region = self.config.get("region")
        if region is None:
            self.warnings.append("region is not set, the environment or us-east-1 will be used")
            return

        if not isinstance(region, str) or not region:
            self.errors.append("region must be a non-empty string")
            return

        if region == "aws-global":
            return

        normalized = region.replace("fips-", "").replace("-fips", "")
        if not REGION_PATTERN.match(normalized):
            self.errors.append(f"Invalid region format: {region}")

    def _validate_endpoint(self):
        """Validate endpoint override and endpoint flags."""
        endpoint = self.config.get("endpointOverride")
        if endpoint:
            parsed = urlparse(endpoint if "://" in endpoint else f"https://{endpoint}")
            if parsed.scheme not in ("http", "https") or not parsed.hostname:
                self.errors.append(f"endpointOverride is not a valid URL: {endpoint}")
            elif parsed.scheme == "http":
                self.warnings.append("endpointOverride uses plain http, requests will not be encrypted")

        scheme = self.config.get("scheme", "https")
        if scheme not in ("http", "https"):
            self.errors.append("scheme must be one of: http, https")

        for flag in ("useFips", "useDualStack"):
            value = self.config.get(flag)
            if value is not None and not isinstance(value, bool):
                self.errors.append(f"{flag} must be a boolean")

        if endpoint and (self.config.get("useFips") or self.config.get("useDualStack")):
            self.warnings.append("useFips and useDualStack are ignored when endpointOverride is set")

    def _validate_timeouts(self):
        """Validate connection and request timeouts."""
        timeouts = self.config.get("timeouts", {})
        for key in ("connectTimeoutMs", "requestTimeoutMs"):
            value = timeouts.get(key)
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                self.errors.append(f"timeouts.{key} must be a positive integer")
            elif value > 300000:
                self.warnings.append(f"timeouts.{key} is longer than five minutes")

    def _validate_retries(self):
        """Validate retry strategy configuration."""
        retries = self.config.get("retries", {})

        max_attempts = retries.get("maxAttempts")
        if max_attempts is not None:
            if not isinstance(max_attempts, int) or isinstance(max_attempts, bool) or max_attempts < 1:
                self.errors.append("retries.maxAttempts must be a positive integer")
            elif max_attempts > 10:
                self.warnings.append("High retries.maxAttempts may hide persistent failures")

        for key in ("scaleFactorMs", "maxBackoffMs"):
            value = retries.get(key)
            if value is not None and (not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0):
                self.errors.append(f"retries.{key} must be a non-negative number")

        scale = retries.get("scaleFactorMs")
        cap = retries.get("maxBackoffMs")
        if isinstance(scale, (int, float)) and isinstance(cap, (int, float)) and cap < scale:
            self.errors.append("retries.maxBackoffMs should be >= scaleFactorMs")

    def _validate_http(self):
        """Validate HTTP connection pool and transport settings."""
        http = self.config.get("http", {})

        max_connections = http.get("maxConnections")
        if max_connections is not None:
            if not isinstance(max_connections, int) or isinstance(max_connections, bool) or max_connections < 1:
                self.errors.append("http.maxConnections must be a positive integer")
            elif max_connections > 500:
                self.warnings.append("Very large http.maxConnections may exhaust file descriptors")

        verify_ssl = http.get("verifySsl")
        if verify_ssl is False:
            self.warnings.append("http.verifySsl is disabled, TLS certificates will not be checked")

        proxy = http.get("proxy")
        if proxy and not re.match(r'^https?://', proxy):
            self.errors.append("http.proxy must be an http:// or https:// URL")

    def _validate_executor(self):
        """Validate executor configuration."""
        executor = self.config.get("executor", {})
        max_workers = executor.get("maxWorkers")
        if max_workers is not None and (not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers < 1):
            self.errors.append("executor.maxWorkers must be a positive integer")

    def _validate_signing(self):
        """Validate request signing configuration."""
        signing = self.config.get("signing", {})
        if signing.get("enabled") is False:
            self.warnings.append("signing.enabled is false, requests will be sent unsigned")

        exclude = signing.get("excludeServices", [])
        if not isinstance(exclude, list) or not all(isinstance(s, str) for s in exclude):
            self.errors.append("signing.excludeServices must be a list of service names")

    def get_validation_summary(self) -> str:
        """Get a formatted validation summary."""
        summary = []

        if self.errors:
            summary.append("❌ ERRORS:")
            for error in self.errors:
                summary.append(f"  - {error}")

        if self.warnings:
            summary.append("⚠️  WARNINGS:")
            for warning in self.warnings:
                summary.append(f"  - {warning}")

        if not self.errors and not self.warnings:
            summary.append("✅ Configuration is valid!")

        return "\n".join(summary)


def validate_config(config_path: str = "aws_clients.json") -> Tuple[bool, str]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, summary_message)
    """
    validator = ConfigValidator(config_path)
    is_valid, errors, warnings = validator.validate_all()
    summary = validator.get_validation_summary()

    return is_valid, summary
