# SPDX-License-Identifier: Apache-2.0
"""Shared domain kernel for Apex."""

from __future__ import annotations

from .entities import UNPERSISTED_ID, AuditableEntity, DomainEnum, Entity, utc_now
from .exceptions import DomainException, DomainValidationError
from .value_objects import (
    BondSymbol,
    BusinessDocument,
    BusinessDocumentType,
    DateRange,
    Isin,
    Money,
    Rate,
)

__all__ = [
    "UNPERSISTED_ID",
    "AuditableEntity",
    "DomainEnum",
    "Entity",
    "utc_now",
    "DomainException",
    "DomainValidationError",
    "BondSymbol",
    "BusinessDocument",
    "BusinessDocumentType",
    "DateRange",
    "Isin",
    "Money",
    "Rate",
]
