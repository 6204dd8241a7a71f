"""
Retry policy for service operations.
"""
import logging
from typing import Optional

from .error_handler import AWSError

logger = logging.getLogger(__name__)


class RetryStrategy:
    """
    Exponential back-off retry policy.

    The first retry is immediate; retry n (n >= 1) waits
    ``scale_factor_ms * 2**n`` milliseconds, capped at ``max_backoff_ms``.
    Only errors flagged retryable are retried.
    """

    def __init__(self, max_attempts: int = 3, scale_factor_ms: float = 25, max_backoff_ms: float = 20000):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.scale_factor_ms = scale_factor_ms
        self.max_backoff_ms = max_backoff_ms

    @classmethod
    def from_config(cls, config) -> "RetryStrategy":
        return cls(
            max_attempts=config.max_attempts,
            scale_factor_ms=config.retry_scale_factor_ms,
            max_backoff_ms=config.max_backoff_ms,
        )

    def should_retry(self, error: Optional[AWSError], attempted_retries: int) -> bool:
        """
        Decide whether a failed attempt should be retried.

        Args:
            error: Error of the failed attempt
            attempted_retries: Retries already performed (0 after the first attempt)
        """
        if error is None or not error.retryable:
            return False
        return attempted_retries + 1 < self.max_attempts

    def delay_before_next_retry_ms(self, error: Optional[AWSError], attempted_retries: int) -> float:
        """Milliseconds to wait before the next retry."""
        if attempted_retries == 0:
            return 0
        return min(self.scale_factor_ms * (2 ** attempted_retries), self.max_backoff_ms)

    def __repr__(self) -> str:
        return (
            f"RetryStrategy(max_attempts={self.max_attempts}, "
            f"scale_factor_ms={self.scale_factor_ms}, max_backoff_ms={self.max_backoff_ms})"
        )
