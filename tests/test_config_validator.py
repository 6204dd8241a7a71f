"""
Tests for config_validator.py - Configuration validation functionality.
"""
import json
import os
import tempfile
import unittest

from aws_service_clients.config_validator import ConfigValidator, validate_config


class TestConfigValidator(unittest.TestCase):
    """Test configuration validator functionality."""

    def setUp(self):
        """Set up test environment."""
        self.valid_config = {
            "region": "us-east-1",
            "useFips": False,
            "useDualStack": False,
            "timeouts": {
                "connectTimeoutMs": 1000,
                "requestTimeoutMs": 3000
            },
            "retries": {
                "maxAttempts": 3,
                "scaleFactorMs": 25,
                "maxBackoffMs": 20000
            },
            "http": {
                "maxConnections": 25,
                "verifySsl": True
            },
            "executor": {
                "maxWorkers": 8
            },
            "signing": {
                "enabled": True,
                "excludeServices": []
            }
        }

    def _write(self, content):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)
            return f.name

    def test_load_config_success(self):
        """Test successful config loading."""
        config_path = self._write(self.valid_config)

        try:
            validator = ConfigValidator(config_path)
            result = validator.load_config()
            self.assertTrue(result)
            self.assertEqual(validator.config, self.valid_config)
        finally:
            os.unlink(config_path)

    def test_load_config_file_not_found(self):
        """Test config loading with missing file."""
        validator = ConfigValidator("nonexistent.json")
        result = validator.load_config()
        self.assertFalse(result)
        self.assertIn("not found", validator.errors[0])

    def test_load_config_invalid_json(self):
        """Test config loading with invalid JSON."""
        config_path = self._write('{"invalid": json}')

        try:
            validator = ConfigValidator(config_path)
            result = validator.load_config()
            self.assertFalse(result)
            self.assertIn("Invalid JSON", validator.errors[0])
        finally:
            os.unlink(config_path)

    def test_load_config_not_an_object(self):
        """Test config loading with a JSON list."""
        config_path = self._write([1, 2])

        try:
            validator = ConfigValidator(config_path)
            self.assertFalse(validator.load_config())
            self.assertIn("must be a JSON object", validator.errors[0])
        finally:
            os.unlink(config_path)

    def test_validate_region_valid(self):
        """Test valid region validation."""
        for region in ("us-east-1", "eu-central-2", "us-gov-west-1", "fips-us-east-1", "aws-global"):
            validator = ConfigValidator()
            validator.config = {"region": region}
            validator._validate_region()
            self.assertEqual(len(validator.errors), 0, region)

    def test_validate_region_missing(self):
        """Test missing region produces a warning only."""
        validator = ConfigValidator()
        validator.config = {}
        validator._validate_region()
        self.assertEqual(len(validator.errors), 0)
        self.assertIn("region is not set", validator.warnings[0])

    def test_validate_region_invalid_format(self):
        """Test invalid region format."""
        validator = ConfigValidator()
        validator.config = {"region": "invalid-region"}
        validator._validate_region()
        self.assertIn("Invalid region format", validator.errors[0])

    def test_validate_endpoint_invalid_url(self):
        """Test an endpoint override that is not a URL."""
        validator = ConfigValidator()
        validator.config = {"endpointOverride": "ftp://example.com"}
        validator._validate_endpoint()
        self.assertIn("not a valid URL", validator.errors[0])

    def test_validate_endpoint_plain_http_warning(self):
        """Test plain http override warning."""
        validator = ConfigValidator()
        validator.config = {"endpointOverride": "http://localhost:4566"}
        validator._validate_endpoint()
        self.assertEqual(len(validator.errors), 0)
        self.assertIn("plain http", validator.warnings[0])

    def test_validate_endpoint_flags_must_be_boolean(self):
        """Test FIPS and dual-stack flag types."""
        validator = ConfigValidator()
        validator.config = {"useFips": "yes", "useDualStack": 1}
        validator._validate_endpoint()
        self.assertEqual(validator.errors, ["useFips must be a boolean", "useDualStack must be a boolean"])

    def test_validate_timeouts_invalid(self):
        """Test invalid timeouts."""
        validator = ConfigValidator()
        validator.config = {"timeouts": {"connectTimeoutMs": 0, "requestTimeoutMs": "fast"}}
        validator._validate_timeouts()
        self.assertEqual(len(validator.errors), 2)
        self.assertIn("must be a positive integer", validator.errors[0])

    def test_validate_retries_invalid_attempts(self):
        """Test invalid retry attempts."""
        validator = ConfigValidator()
        validator.config = {"retries": {"maxAttempts": 0}}
        validator._validate_retries()
        self.assertIn("retries.maxAttempts must be a positive integer", validator.errors)

    def test_validate_retries_high_attempts_warning(self):
        """Test high retry attempts warning."""
        validator = ConfigValidator()
        validator.config = {"retries": {"maxAttempts": 20}}
        validator._validate_retries()
        self.assertIn("may hide persistent failures", validator.warnings[0])

    def test_validate_retries_backoff_below_scale(self):
        """Test back-off cap lower than the scale factor."""
        validator = ConfigValidator()
        validator.config = {"retries": {"scaleFactorMs": 100, "maxBackoffMs": 10}}
        validator._validate_retries()
        self.assertIn("retries.maxBackoffMs should be >= scaleFactorMs", validator.errors)

    def test_validate_http_config(self):
        """Test HTTP pool and proxy validation."""
        validator = ConfigValidator()
        validator.config = {"http": {"maxConnections": -5, "proxy": "socks://proxy", "verifySsl": False}}
        validator._validate_http()
        self.assertIn("http.maxConnections must be a positive integer", validator.errors)
        self.assertIn("http.proxy must be an http:// or https:// URL", validator.errors)
        self.assertIn("verifySsl is disabled", validator.warnings[0])

    def test_validate_signing_config(self):
        """Test signing configuration validation."""
        validator = ConfigValidator()
        validator.config = {"signing": {"enabled": False, "excludeServices": "glacier"}}
        validator._validate_signing()
        self.assertIn("signing.excludeServices must be a list of service names", validator.errors)
        self.assertIn("requests will be sent unsigned", validator.warnings[0])

    def test_validate_all_success(self):
        """Test complete validation success."""
        config_path = self._write(self.valid_config)

        try:
            validator = ConfigValidator(config_path)
            is_valid, errors, warnings = validator.validate_all()
            self.assertTrue(is_valid)
            self.assertEqual(len(errors), 0)
        finally:
            os.unlink(config_path)

    def test_get_validation_summary(self):
        """Test validation summary generation."""
        validator = ConfigValidator()
        validator.errors = ["Error 1", "Error 2"]
        validator.warnings = ["Warning 1"]

        summary = validator.get_validation_summary()
        self.assertIn("❌ ERRORS:", summary)
        self.assertIn("Error 1", summary)
        self.assertIn("⚠️  WARNINGS:", summary)
        self.assertIn("Warning 1", summary)

    def test_get_validation_summary_success(self):
        """Test validation summary for successful validation."""
        validator = ConfigValidator()
        summary = validator.get_validation_summary()
        self.assertIn("✅ Configuration is valid!", summary)

    def test_validate_config_function(self):
        """Test standalone validate_config function."""
        config_path = self._write(self.valid_config)

        try:
            is_valid, summary = validate_config(config_path)
            self.assertTrue(is_valid)
            self.assertIn("✅", summary)
        finally:
            os.unlink(config_path)


if __name__ == '__main__':
    unittest.main()
