# SPDX-License-Identifier: Apache-2.0
"""Bond response projections."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from ..domain.entities import Bond, BondDetail


class BondResponse(BaseModel):
    """Projection of a bond, including its date-derived status."""

    model_config = ConfigDict(frozen=True)

    id: int
    api_id: uuid.UUID
    symbol: str
    isin: str
    issuance_at: Union[datetime, date]
    expiration_at: Union[datetime, date]
    bond_detail_id: Optional[int] = None
    is_cetip_verified: bool
    has_expired: bool
    is_active: bool
    remaining_days: int
    duration_in_calendar_days: int
    created_at: datetime
    last_updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, bond: Bond) -> "BondResponse":
        return cls(
            id=bond.id,
            api_id=bond.api_id,
            symbol=bond.symbol.value,
            isin=bond.isin.value,
            issuance_at=bond.issuance_at,
            expiration_at=bond.expiration_at,
            bond_detail_id=bond.bond_detail_id,
            is_cetip_verified=bond.is_cetip_verified,
            has_expired=bond.has_expired,
            is_active=bond.is_active,
            remaining_days=bond.remaining_days,
            duration_in_calendar_days=bond.duration_in_calendar_days,
            created_at=bond.created_at,
            last_updated_at=bond.last_updated_at,
        )


class BondDetailResponse(BaseModel):
    """Projection of bond terms with classification and display labels."""

    model_config = ConfigDict(frozen=True)

    id: int
    fantasy_name: Optional[str] = None
    deadline_calendar_days: int
    deadline_calendar_years: Decimal
    initial_unit_value: Decimal
    benchmark_percentual_rate: Decimal
    fixed_percentual_rate: Decimal
    is_available: bool
    is_exempt_debenture: bool
    days_to_grace_period: int
    market_index_id: int
    bond_base_id: int
    bond_emitter_id: int
    is_pre_fixed: bool
    is_post_fixed: bool
    is_hybrid: bool
    liquidity_description: str
    deadline_description: str
    created_at: datetime
    last_updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, detail: BondDetail) -> "BondDetailResponse":
        return cls(
            id=detail.id,
            fantasy_name=detail.fantasy_name,
            deadline_calendar_days=detail.deadline_calendar_days,
            deadline_calendar_years=detail.deadline_calendar_years,
            initial_unit_value=detail.initial_unit_value.amount,
            benchmark_percentual_rate=detail.benchmark_percentual_rate.value,
            fixed_percentual_rate=detail.fixed_percentual_rate.value,
            is_available=detail.is_available,
            is_exempt_debenture=detail.is_exempt_debenture,
            days_to_grace_period=detail.days_to_grace_period,
            market_index_id=detail.market_index_id,
            bond_base_id=detail.bond_base_id,
            bond_emitter_id=detail.bond_emitter_id,
            is_pre_fixed=detail.is_pre_fixed,
            is_post_fixed=detail.is_post_fixed,
            is_hybrid=detail.is_hybrid,
            liquidity_description=detail.get_liquidity_description(),
            deadline_description=detail.get_deadline_description(),
            created_at=detail.created_at,
            last_updated_at=detail.last_updated_at,
        )
