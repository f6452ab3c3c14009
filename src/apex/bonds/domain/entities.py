# SPDX-License-Identifier: Apache-2.0
"""Bond aggregates.

``Bond`` is a tradable instrument identified by its ISIN. ``BondDetail``
holds the product terms (deadline, rates, grace period) shared by the bonds
linked to it.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional

from apex.domain.entities import UNPERSISTED_ID, AuditableEntity, utc_now
from apex.domain.exceptions import DomainValidationError
from apex.domain.value_objects import (
    DAYS_PER_YEAR,
    BondSymbol,
    DateLike,
    Isin,
    Money,
    Numeric,
    Rate,
    as_date,
    comparable_dates,
)

from .exceptions import (
    BondExpiredError,
    BondNotActiveError,
    CetipVerificationError,
    InvalidBondError,
)

CETIP_VERIFICATION_REQUIRED = "Bond requires CETIP verification before trading."


def _is_after(later: DateLike, earlier: DateLike) -> bool:
    first, second = comparable_dates(earlier, later)
    return second > first


class Bond(AuditableEntity):
    """Bond aggregate root.

    Expiration is strictly after issuance at creation. Bonds with an
    expiration in the past may still be created (historical loads); the
    ``has_expired`` and ``is_active`` predicates cover the business rules.
    """

    def __init__(
        self,
        symbol: BondSymbol,
        isin: Isin,
        issuance_at: DateLike,
        expiration_at: DateLike,
        bond_detail_id: Optional[int] = None,
        is_cetip_verified: bool = False,
        api_id: Optional[uuid.UUID] = None,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
    ):
        super().__init__(id, created_at, last_updated_at)
        self._symbol = symbol
        self._isin = isin
        self._issuance_at = issuance_at
        self._expiration_at = expiration_at
        self._bond_detail_id = bond_detail_id
        self._is_cetip_verified = is_cetip_verified
        self._api_id = api_id if api_id is not None else uuid.uuid4()

    @classmethod
    def create(
        cls,
        symbol: str,
        isin: str,
        issuance_at: DateLike,
        expiration_at: DateLike,
        bond_detail_id: Optional[int] = None,
        is_cetip_verified: bool = False,
        api_id: Optional[uuid.UUID] = None,
    ) -> Bond:
        """Create a new bond.

        Validation order is symbol, ISIN, then dates.

        Raises:
            DomainValidationError: If the symbol or ISIN is malformed
            InvalidBondError: If expiration is not after issuance, or api_id
                is the nil UUID
        """
        bond_symbol = BondSymbol.create(symbol)
        bond_isin = Isin.create(isin)

        if not _is_after(expiration_at, issuance_at):
            raise InvalidBondError(
                f"Expiration date must be after issuance date for bond '{bond_symbol.value}'."
            )
        if api_id is not None and api_id == uuid.UUID(int=0):
            raise InvalidBondError("API ID cannot be empty.")

        return cls(
            symbol=bond_symbol,
            isin=bond_isin,
            issuance_at=issuance_at,
            expiration_at=expiration_at,
            bond_detail_id=bond_detail_id,
            is_cetip_verified=is_cetip_verified,
            api_id=api_id,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        symbol: str,
        isin: str,
        issuance_at: DateLike,
        expiration_at: DateLike,
        bond_detail_id: Optional[int],
        is_cetip_verified: bool,
        api_id: uuid.UUID,
        created_at: datetime,
        last_updated_at: Optional[datetime] = None,
    ) -> Bond:
        """Restore a persisted bond. Value objects are re-validated."""
        return cls(
            symbol=BondSymbol.create(symbol),
            isin=Isin.create(isin),
            issuance_at=issuance_at,
            expiration_at=expiration_at,
            bond_detail_id=bond_detail_id,
            is_cetip_verified=is_cetip_verified,
            api_id=api_id,
            id=id,
            created_at=created_at,
            last_updated_at=last_updated_at,
        )

    # Properties

    @property
    def symbol(self) -> BondSymbol:
        return self._symbol

    @property
    def isin(self) -> Isin:
        return self._isin

    @property
    def issuance_at(self) -> DateLike:
        return self._issuance_at

    @property
    def expiration_at(self) -> DateLike:
        return self._expiration_at

    @property
    def bond_detail_id(self) -> Optional[int]:
        return self._bond_detail_id

    @property
    def is_cetip_verified(self) -> bool:
        return self._is_cetip_verified

    @property
    def api_id(self) -> uuid.UUID:
        return self._api_id

    @property
    def has_bond_detail(self) -> bool:
        return self._bond_detail_id is not None

    # Derived values read the stored dates directly; ordering was checked at
    # creation and reconstituted bonds are not re-validated.

    @property
    def has_expired(self) -> bool:
        return as_date(self._expiration_at) < utc_now().date()

    @property
    def is_active(self) -> bool:
        return not self.has_expired and as_date(self._issuance_at) <= utc_now().date()

    @property
    def remaining_days(self) -> int:
        return max(0, (as_date(self._expiration_at) - utc_now().date()).days)

    @property
    def duration_in_calendar_days(self) -> int:
        return (as_date(self._expiration_at) - as_date(self._issuance_at)).days

    @property
    def duration_in_years(self) -> Decimal:
        return Decimal(self.duration_in_calendar_days) / DAYS_PER_YEAR

    # Mutations

    def update_cetip_verification(self, is_verified: bool) -> None:
        self._is_cetip_verified = is_verified
        self._touch()

    def update_api_id(self, api_id: uuid.UUID) -> None:
        if api_id == uuid.UUID(int=0):
            raise InvalidBondError("API ID cannot be empty.")
        self._api_id = api_id
        self._touch()

    def link_to_bond_detail(self, bond_detail_id: int) -> None:
        if bond_detail_id <= 0:
            raise InvalidBondError(
                f"Invalid BondDetailId: {bond_detail_id}. Must be greater than zero."
            )
        self._bond_detail_id = bond_detail_id
        self._touch()

    def unlink_from_bond_detail(self) -> None:
        self._bond_detail_id = None
        self._touch()

    def extend_expiration(self, new_expiration_at: DateLike) -> None:
        """Move the expiration date forward.

        The new date must be after the current expiration, and after issuance.

        Raises:
            InvalidBondError: If either ordering rule is broken
        """
        if not _is_after(new_expiration_at, self._expiration_at):
            raise InvalidBondError(
                "New expiration date must be after current expiration date "
                f"({self._expiration_at:%Y-%m-%d})."
            )
        if not _is_after(new_expiration_at, self._issuance_at):
            raise InvalidBondError(
                f"Expiration date must be after issuance date ({self._issuance_at:%Y-%m-%d})."
            )
        self._expiration_at = new_expiration_at
        self._touch()

    def update_symbol(self, symbol: str) -> None:
        self._symbol = BondSymbol.create(symbol)
        self._touch()

    def update_isin(self, isin: str) -> None:
        self._isin = Isin.create(isin)
        self._touch()

    # Guards

    def ensure_is_active(self) -> None:
        if not self.is_active:
            raise BondNotActiveError(self._symbol.value)

    def ensure_not_expired(self) -> None:
        if self.has_expired:
            raise BondExpiredError(self._symbol.value, self._expiration_at)

    def ensure_cetip_verified(self) -> None:
        if not self._is_cetip_verified:
            raise CetipVerificationError(self._symbol.value, CETIP_VERIFICATION_REQUIRED)

    def __repr__(self) -> str:
        return f"Bond(id={self.id}, symbol={self._symbol.value!r}, isin={self._isin.value!r})"


class BondDetail(AuditableEntity):
    """Product terms of a bond: deadline, rates, grace period and foreign ids."""

    DAILY_LIQUIDITY_LABEL = "Diária"
    MATURITY_LIQUIDITY_LABEL = "No Vencimento"

    def __init__(
        self,
        fantasy_name: Optional[str],
        deadline_calendar_days: int,
        initial_unit_value: Money,
        benchmark_percentual_rate: Rate,
        fixed_percentual_rate: Rate,
        is_available: bool,
        is_exempt_debenture: bool,
        days_to_grace_period: int,
        market_index_id: int,
        bond_base_id: int,
        bond_emitter_id: int,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
    ):
        super().__init__(id, created_at, last_updated_at)
        self._fantasy_name = fantasy_name
        self._deadline_calendar_days = deadline_calendar_days
        self._initial_unit_value = initial_unit_value
        self._benchmark_percentual_rate = benchmark_percentual_rate
        self._fixed_percentual_rate = fixed_percentual_rate
        self._is_available = is_available
        self._is_exempt_debenture = is_exempt_debenture
        self._days_to_grace_period = days_to_grace_period
        self._market_index_id = market_index_id
        self._bond_base_id = bond_base_id
        self._bond_emitter_id = bond_emitter_id

    @classmethod
    def create(
        cls,
        fantasy_name: Optional[str],
        deadline_calendar_days: int,
        initial_unit_value: Numeric,
        benchmark_percentual_rate: Numeric,
        fixed_percentual_rate: Numeric,
        is_available: bool,
        is_exempt_debenture: bool,
        days_to_grace_period: int,
        market_index_id: int,
        bond_base_id: int,
        bond_emitter_id: int,
    ) -> BondDetail:
        """Create new bond terms.

        Raises:
            DomainValidationError: If the deadline, grace period, foreign ids,
                unit value or rates are invalid
        """
        if deadline_calendar_days <= 0:
            raise DomainValidationError(
                "Deadline calendar days must be greater than zero.", "deadline_calendar_days"
            )
        cls._validate_grace_period(days_to_grace_period, deadline_calendar_days)
        for value, label, field in (
            (market_index_id, "Market index ID", "market_index_id"),
            (bond_base_id, "Bond base ID", "bond_base_id"),
            (bond_emitter_id, "Bond emitter ID", "bond_emitter_id"),
        ):
            if value <= 0:
                raise DomainValidationError(f"{label} must be greater than zero.", field)

        return cls(
            fantasy_name=fantasy_name.strip() if fantasy_name is not None else None,
            deadline_calendar_days=deadline_calendar_days,
            initial_unit_value=cls._validate_unit_value(initial_unit_value),
            benchmark_percentual_rate=Rate.create(benchmark_percentual_rate),
            fixed_percentual_rate=Rate.create(fixed_percentual_rate),
            is_available=is_available,
            is_exempt_debenture=is_exempt_debenture,
            days_to_grace_period=days_to_grace_period,
            market_index_id=market_index_id,
            bond_base_id=bond_base_id,
            bond_emitter_id=bond_emitter_id,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        fantasy_name: Optional[str],
        deadline_calendar_days: int,
        initial_unit_value: Numeric,
        benchmark_percentual_rate: Numeric,
        fixed_percentual_rate: Numeric,
        is_available: bool,
        is_exempt_debenture: bool,
        days_to_grace_period: int,
        market_index_id: int,
        bond_base_id: int,
        bond_emitter_id: int,
        created_at: datetime,
        last_updated_at: Optional[datetime] = None,
    ) -> BondDetail:
        """Restore persisted terms; value objects are rebuilt."""
        return cls(
            fantasy_name=fantasy_name,
            deadline_calendar_days=deadline_calendar_days,
            initial_unit_value=Money.create(initial_unit_value),
            benchmark_percentual_rate=Rate.create(benchmark_percentual_rate),
            fixed_percentual_rate=Rate.create(fixed_percentual_rate),
            is_available=is_available,
            is_exempt_debenture=is_exempt_debenture,
            days_to_grace_period=days_to_grace_period,
            market_index_id=market_index_id,
            bond_base_id=bond_base_id,
            bond_emitter_id=bond_emitter_id,
            id=id,
            created_at=created_at,
            last_updated_at=last_updated_at,
        )

    @staticmethod
    def _validate_grace_period(days_to_grace_period: int, deadline_calendar_days: int) -> None:
        if days_to_grace_period < 0:
            raise DomainValidationError(
                "Days to grace period cannot be negative.", "days_to_grace_period"
            )
        if days_to_grace_period > deadline_calendar_days:
            raise DomainValidationError(
                "Grace period cannot exceed deadline.", "days_to_grace_period"
            )

    @staticmethod
    def _validate_unit_value(value: Numeric) -> Money:
        money = Money.create(value)
        if money.is_negative:
            raise DomainValidationError(
                "Initial unit value cannot be negative.", "initial_unit_value"
            )
        return money

    # Properties

    @property
    def fantasy_name(self) -> Optional[str]:
        return self._fantasy_name

    @property
    def deadline_calendar_days(self) -> int:
        return self._deadline_calendar_days

    @property
    def deadline_calendar_years(self) -> Decimal:
        """Deadline in 360-day years, rounded to one decimal place."""
        years = Decimal(self._deadline_calendar_days) / DAYS_PER_YEAR
        return years.quantize(Decimal("0.1"), rounding=ROUND_HALF_EVEN)

    @property
    def initial_unit_value(self) -> Money:
        return self._initial_unit_value

    @property
    def benchmark_percentual_rate(self) -> Rate:
        return self._benchmark_percentual_rate

    @property
    def fixed_percentual_rate(self) -> Rate:
        return self._fixed_percentual_rate

    @property
    def is_available(self) -> bool:
        return self._is_available

    @property
    def is_exempt_debenture(self) -> bool:
        return self._is_exempt_debenture

    @property
    def days_to_grace_period(self) -> int:
        return self._days_to_grace_period

    @property
    def market_index_id(self) -> int:
        return self._market_index_id

    @property
    def bond_base_id(self) -> int:
        return self._bond_base_id

    @property
    def bond_emitter_id(self) -> int:
        return self._bond_emitter_id

    @property
    def has_daily_liquidity(self) -> bool:
        return self._days_to_grace_period == 0

    @property
    def liquidity_at_maturity_only(self) -> bool:
        return self._days_to_grace_period == self._deadline_calendar_days

    @property
    def is_pre_fixed(self) -> bool:
        return self._fixed_percentual_rate.value > 0 and self._benchmark_percentual_rate.is_zero

    @property
    def is_post_fixed(self) -> bool:
        return self._benchmark_percentual_rate.value > 0

    @property
    def is_hybrid(self) -> bool:
        return self._fixed_percentual_rate.value > 0 and self._benchmark_percentual_rate.value > 0

    # Mutations

    def update_rates(
        self,
        benchmark_percentual_rate: Numeric,
        fixed_percentual_rate: Numeric,
        days_to_grace_period: int,
    ) -> None:
        """Replace both rates and the grace period, checked against the current deadline."""
        self._validate_grace_period(days_to_grace_period, self._deadline_calendar_days)
        benchmark = Rate.create(benchmark_percentual_rate)
        fixed = Rate.create(fixed_percentual_rate)
        self._benchmark_percentual_rate = benchmark
        self._fixed_percentual_rate = fixed
        self._days_to_grace_period = days_to_grace_period
        self._touch()

    def update_initial_unit_value(self, value: Numeric) -> None:
        self._initial_unit_value = self._validate_unit_value(value)
        self._touch()

    def update_fantasy_name(self, fantasy_name: Optional[str]) -> None:
        self._fantasy_name = fantasy_name.strip() if fantasy_name is not None else None
        self._touch()

    def update_availability(self, is_available: bool) -> None:
        self._is_available = is_available
        self._touch()

    def make_available(self) -> None:
        self.update_availability(True)

    def make_unavailable(self) -> None:
        self.update_availability(False)

    # Labels

    def get_liquidity_description(self) -> str:
        if self.has_daily_liquidity:
            return self.DAILY_LIQUIDITY_LABEL
        if self.liquidity_at_maturity_only:
            return self.MATURITY_LIQUIDITY_LABEL
        return f"{self._days_to_grace_period} dias"

    def get_deadline_description(self) -> str:
        years = self.deadline_calendar_years
        if years < 1:
            return f"{self._deadline_calendar_days} dias"
        if years == 1:
            return "1 ano"
        return f"{years.normalize():f} anos"

    def __repr__(self) -> str:
        return (
            f"BondDetail(id={self.id}, deadline={self._deadline_calendar_days}, "
            f"grace={self._days_to_grace_period})"
        )
