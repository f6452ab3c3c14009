# SPDX-License-Identifier: Apache-2.0
"""Base exceptions for the Apex domain layer.

Two families of errors are raised from inside the domain:

- ``DomainValidationError`` for malformed input (empty fields, oversized
  strings, invalid document or ISIN formats). It subclasses ``ValueError``
  so callers that only care about "bad argument" semantics can catch it as
  such.
- ``DomainException`` for business rule violations on otherwise well-formed
  data (expiration before issuance, operations on expired bonds, missing
  external system registers).

Application handlers catch both and turn them into ``Result`` failures.
"""

from __future__ import annotations

from typing import Optional


class DomainValidationError(ValueError):
    """Raised when a value object or entity receives an invalid argument."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DomainException(Exception):
    """Base class for business rule violations raised by aggregates."""

    pass
