"""
Result-or-error wrapper returned by every operation.
"""
from typing import Any, Optional

from .error_handler import AWSError


class Outcome:
    """Holds either the result of an operation or the error that stopped it."""

    __slots__ = ("_result", "_error")

    def __init__(self, result: Any = None, error: Optional[AWSError] = None):
        if result is not None and error is not None:
            raise ValueError("An outcome holds a result or an error, not both")
        self._result = result
        self._error = error

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def result(self) -> Any:
        return self._result

    @property
    def error(self) -> Optional[AWSError]:
        return self._error

    def get_result_or_raise(self) -> Any:
        """Return the result, raising ServiceError if the operation failed."""
        if self._error is not None:
            self._error.raise_for_error()
        return self._result

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return f"Outcome(result={self._result!r})"
        return f"Outcome(error={self._error!r})"
