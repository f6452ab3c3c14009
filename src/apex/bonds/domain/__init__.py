# SPDX-License-Identifier: Apache-2.0
"""Bond domain model."""

from __future__ import annotations

from .entities import Bond, BondDetail
from .exceptions import (
    BondExpiredError,
    BondNotActiveError,
    CetipVerificationError,
    InvalidBondError,
)
from .reference_data import (
    BondBase,
    BondEmitter,
    CreditRating,
    CustodyChamberType,
    EmitterType,
    MarketIndex,
    MarketIndexType,
    MarketType,
)
from .repositories import (
    BondDetailNotFoundError,
    BondNotFoundError,
    BondRepositoryError,
    DuplicateBondError,
    IBondDetailRepository,
    IBondRepository,
)

__all__ = [
    "Bond",
    "BondDetail",
    "BondExpiredError",
    "BondNotActiveError",
    "CetipVerificationError",
    "InvalidBondError",
    "BondBase",
    "BondEmitter",
    "CreditRating",
    "CustodyChamberType",
    "EmitterType",
    "MarketIndex",
    "MarketIndexType",
    "MarketType",
    "BondDetailNotFoundError",
    "BondNotFoundError",
    "BondRepositoryError",
    "DuplicateBondError",
    "IBondDetailRepository",
    "IBondRepository",
]
