# SPDX-License-Identifier: Apache-2.0
"""Bond application layer."""

from __future__ import annotations

from .commands import CreateBondCommand, CreateBondDetailCommand, ExtendBondExpirationCommand
from .errors import BondDetailErrors, BondErrors
from .queries import GetBondDetailQuery, GetBondQuery
from .responses import BondDetailResponse, BondResponse
from .services import (
    CreateBondDetailHandler,
    CreateBondHandler,
    ExtendBondExpirationHandler,
    GetBondDetailHandler,
    GetBondHandler,
)

__all__ = [
    "CreateBondCommand",
    "CreateBondDetailCommand",
    "ExtendBondExpirationCommand",
    "BondDetailErrors",
    "BondErrors",
    "GetBondDetailQuery",
    "GetBondQuery",
    "BondDetailResponse",
    "BondResponse",
    "CreateBondDetailHandler",
    "CreateBondHandler",
    "ExtendBondExpirationHandler",
    "GetBondDetailHandler",
    "GetBondHandler",
]
