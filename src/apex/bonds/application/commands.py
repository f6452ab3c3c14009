# SPDX-License-Identifier: Apache-2.0
"""Bond application commands."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from apex.domain.value_objects import DateLike, Numeric


@dataclass(frozen=True)
class CreateBondCommand:
    """Command to register a new bond."""

    symbol: str
    isin: str
    issuance_at: DateLike
    expiration_at: DateLike
    bond_detail_id: Optional[int] = None
    is_cetip_verified: bool = False
    api_id: Optional[uuid.UUID] = None


@dataclass(frozen=True)
class ExtendBondExpirationCommand:
    """Command to push a bond's expiration date forward."""

    bond_id: int
    new_expiration_at: DateLike


@dataclass(frozen=True)
class CreateBondDetailCommand:
    """Command to register new bond terms."""

    deadline_calendar_days: int
    initial_unit_value: Numeric
    benchmark_percentual_rate: Numeric
    fixed_percentual_rate: Numeric
    days_to_grace_period: int
    market_index_id: int
    bond_base_id: int
    bond_emitter_id: int
    fantasy_name: Optional[str] = None
    is_available: bool = True
    is_exempt_debenture: bool = False
