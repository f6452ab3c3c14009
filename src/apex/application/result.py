# SPDX-License-Identifier: Apache-2.0
"""Result and Error types returned by every command and query handler.

Handlers never raise for expected business outcomes. They return a
``Result`` that is either a success (optionally carrying a value) or a
failure carrying an ``Error``. Error codes follow ``{Aggregate}.{Reason}``,
for example ``Customer.NotFound``; boundary layers translate them with
``status_code_for``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStateError(RuntimeError):
    """Raised when a Result is built or read inconsistently.

    This signals a programming error, not a business failure.
    """

    pass


@dataclass(frozen=True)
class Error:
    """Business error with a machine-readable code and a human message."""

    code: str
    message: str

    NONE: ClassVar["Error"]

    @property
    def is_none(self) -> bool:
        return self == Error.NONE

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


Error.NONE = Error("", "")


class Result(Generic[T]):
    """Outcome of a handler call."""

    __slots__ = ("_is_success", "_error", "_value")

    def __init__(self, is_success: bool, error: Error, value: Optional[T] = None):
        if is_success and error != Error.NONE:
            raise ResultStateError("A successful result cannot carry an error")
        if not is_success and error == Error.NONE:
            raise ResultStateError("A failed result must carry an error")
        self._is_success = is_success
        self._error = error
        self._value = value

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        """Build a successful result, optionally carrying a value."""
        return cls(True, Error.NONE, value)

    @classmethod
    def failure(cls, error: Error) -> "Result[T]":
        """Build a failed result from an error."""
        return cls(False, error)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def error(self) -> Error:
        return self._error

    @property
    def value(self) -> T:
        """Value carried by a success.

        Raises:
            ResultStateError: If the result is a failure
        """
        if not self._is_success:
            raise ResultStateError(
                f"Cannot read the value of a failed result ({self._error.code})"
            )
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"


_STATUS_BY_SUFFIX = {
    "NotFound": 404,
    "AlreadyExists": 409,
    "ValidationFailed": 400,
    "InvalidQuery": 400,
}


def status_code_for(error: Error) -> int:
    """Map an error code to an HTTP-style status by its ``.Reason`` suffix."""
    reason = error.code.rsplit(".", 1)[-1]
    return _STATUS_BY_SUFFIX.get(reason, 400)
