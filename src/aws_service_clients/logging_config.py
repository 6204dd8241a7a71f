"""
Standardized logging configuration for the service clients.
"""
import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        if hasattr(record, 'aws_request_id'):
            log_entry["aws_request_id"] = record.aws_request_id

        if hasattr(record, 'service_name'):
            log_entry["service_name"] = record.service_name

        return json.dumps(log_entry, default=str)


class ContextFilter(logging.Filter):
    """Filter to add context information to log records."""

    def __init__(self, service_name: str = "aws-service-clients"):
        super().__init__()
        self.service_name = service_name
        self.aws_request_id = None

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context information to log record."""
        record.service_name = self.service_name

        if self.aws_request_id:
            record.aws_request_id = self.aws_request_id

        return True

    def set_aws_context(self, aws_request_id: str):
        """Set the request id attached to subsequent records."""
        self.aws_request_id = aws_request_id


class SecurityFilter(logging.Filter):
    """Filter to remove credentials and signatures from logs."""

    SENSITIVE_PATTERNS = [
        re.compile(r'(aws_secret_access_key|secret_key|secretaccesskey)\s*[=:]\s*\S+', re.IGNORECASE),
        re.compile(r'(aws_session_token|session_token|x-amz-security-token)\s*[=:]\s*\S+', re.IGNORECASE),
        re.compile(r'(Signature)=[0-9a-f]{64}', re.IGNORECASE),
        re.compile(r'(Credential)=[A-Z0-9]{16,}', re.IGNORECASE),
        re.compile(r'(password)\s*[=:]\s*\S+', re.IGNORECASE),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact sensitive values from log messages."""
        message = record.getMessage()
        redacted = message

        for pattern in self.SENSITIVE_PATTERNS:
            redacted = pattern.sub(lambda m: f"{m.group(1)}=[REDACTED]", redacted)

        if redacted != message:
            record.msg = redacted
            record.args = ()

        return True


def setup_logging(
    service_name: str = "aws-service-clients",
    log_level: str = None,
    enable_json: bool = None,
    enable_structlog: bool = True,
    stream=None
) -> logging.Logger:
    """
    Set up standardized logging configuration.

    Args:
        service_name: Name of the service for logging context
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: Enable JSON formatting (auto-detected for Lambda)
        enable_structlog: Enable structured logging with structlog
        stream: Output stream for the handler (stdout by default)

    Returns:
        Configured logger instance
    """
    is_lambda = bool(os.environ.get('AWS_LAMBDA_FUNCTION_NAME'))
    is_development = os.environ.get('ENVIRONMENT', 'production').lower() == 'development'

    if log_level is None:
        log_level = os.environ.get('AWS_SERVICE_CLIENTS_LOG_LEVEL') or ('DEBUG' if is_development else 'INFO')

    if enable_json is None:
        enable_json = is_lambda

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)

    if enable_json:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handler.setFormatter(formatter)

    context_filter = ContextFilter(service_name)
    security_filter = SecurityFilter()

    handler.addFilter(context_filter)
    handler.addFilter(security_filter)

    root_logger.addHandler(handler)

    _configure_third_party_loggers()

    if enable_structlog:
        _setup_structlog(enable_json)

    service_logger = logging.getLogger(service_name)
    service_logger.context_filter = context_filter

    service_logger.info(f"Logging configured for {service_name}", extra={
        'extra_fields': {
            'log_level': log_level,
            'json_enabled': enable_json,
            'structlog_enabled': enable_structlog,
            'is_lambda': is_lambda,
            'is_development': is_development
        }
    })

    return service_logger


def _configure_third_party_loggers():
    """Reduce verbosity of the transport and AWS libraries."""
    logging.getLogger('boto3').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)

    logging.getLogger('botocore.credentials').setLevel(logging.INFO)


def _setup_structlog(json_enabled: bool):
    """Set up structlog for structured logging."""
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_enabled:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the standard configuration.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def set_request_context(service_logger: logging.Logger, request_id: str):
    """
    Attach an AWS request id to records emitted through the configured handler.

    Args:
        service_logger: Logger returned by setup_logging
        request_id: Request id to attach
    """
    if hasattr(service_logger, 'context_filter'):
        service_logger.context_filter.set_aws_context(request_id)


def log_performance(operation: str, duration_ms: float, **kwargs):
    """
    Log performance metrics.

    Args:
        operation: Operation name
        duration_ms: Duration in milliseconds
        **kwargs: Additional context
    """
    logger.info(f"Performance: {operation}", extra={
        'extra_fields': {
            'operation': operation,
            'duration_ms': duration_ms,
            'performance_metric': True,
            **kwargs
        }
    })


def log_api_request(service: str, operation: str, method: str, url: str, attempt: int = 1):
    """Log an outgoing API request."""
    logger.debug(f"API request: {service}.{operation} {method} {url}", extra={
        'extra_fields': {
            'api_request': True,
            'service': service,
            'operation': operation,
            'method': method,
            'attempt': attempt
        }
    })


def log_api_response(
    service: str,
    operation: str,
    status_code: Optional[int],
    duration_ms: float,
    request_id: Optional[str] = None
):
    """Log an API response."""
    logger.debug(f"API response: {service}.{operation} -> {status_code}", extra={
        'extra_fields': {
            'api_response': True,
            'service': service,
            'operation': operation,
            'status_code': status_code,
            'duration_ms': duration_ms,
            'request_id': request_id
        }
    })


def log_retry_event(service: str, operation: str, attempt: int, delay_ms: float, error: Any):
    """Log a retry decision."""
    logger.warning(f"Retrying {service}.{operation} after attempt {attempt} in {delay_ms:.0f} ms: {error}", extra={
        'extra_fields': {
            'retry_event': True,
            'service': service,
            'operation': operation,
            'attempt': attempt,
            'delay_ms': delay_ms
        }
    })


def log_client_event(event_type: str, details: Dict[str, Any]):
    """
    Log client lifecycle events (creation, endpoint override, shutdown).

    Args:
        event_type: Type of event
        details: Event details
    """
    logger.info(f"Client event: {event_type}", extra={
        'extra_fields': {
            'client_event': True,
            'event_type': event_type,
            **details
        }
    })
