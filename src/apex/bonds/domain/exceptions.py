# SPDX-License-Identifier: Apache-2.0
"""Business rule violations raised by bond aggregates."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

from apex.domain.exceptions import DomainException


class InvalidBondError(DomainException):
    """Raised when a bond would be created or changed into an invalid state."""

    pass


class BondExpiredError(DomainException):
    """Raised when an operation requires a bond that has not expired."""

    def __init__(self, symbol: str, expiration_at: Union[date, datetime]):
        super().__init__(f"Bond '{symbol}' has expired on {expiration_at:%Y-%m-%d}.")
        self.symbol = symbol
        self.expiration_at = expiration_at


class BondNotActiveError(DomainException):
    """Raised when an operation requires an active bond."""

    def __init__(self, symbol: str):
        super().__init__(f"Bond '{symbol}' is not currently active.")
        self.symbol = symbol


class CetipVerificationError(DomainException):
    """Raised when a bond lacks the CETIP verification an operation needs."""

    def __init__(self, symbol: str, reason: str):
        super().__init__(f"CETIP verification failed for bond '{symbol}': {reason}")
        self.symbol = symbol
        self.reason = reason
