# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the BondDetail aggregate."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from apex.bonds.domain.entities import BondDetail
from apex.domain.exceptions import DomainValidationError


class TestBondDetailCreation:
    """Tests for BondDetail.create validation."""

    @pytest.mark.fast
    def test_create_valid_detail(self, make_bond_detail):
        detail = make_bond_detail(fantasy_name="  CDB Banco X  ")

        assert detail.id == 0
        assert detail.fantasy_name == "CDB Banco X"
        assert detail.initial_unit_value.amount == Decimal("1000.00")
        assert detail.benchmark_percentual_rate.value == Decimal("110")
        assert detail.is_available
        assert detail.last_updated_at is None

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"deadline_calendar_days": 0}, "Deadline calendar days must be greater than zero."),
            ({"days_to_grace_period": -1}, "Days to grace period cannot be negative."),
            ({"days_to_grace_period": 721}, "Grace period cannot exceed deadline."),
            ({"market_index_id": 0}, "Market index ID must be greater than zero."),
            ({"bond_base_id": -5}, "Bond base ID must be greater than zero."),
            ({"bond_emitter_id": 0}, "Bond emitter ID must be greater than zero."),
            ({"fixed_percentual_rate": Decimal("-1")}, "Rate cannot be negative."),
            ({"benchmark_percentual_rate": Decimal("1001")}, "Rate cannot exceed 1000%."),
            ({"initial_unit_value": Decimal("-0.01")}, "Initial unit value cannot be negative."),
        ],
    )
    def test_invalid_terms_rejected(self, make_bond_detail, overrides, message):
        with pytest.raises(DomainValidationError) as exc_info:
            make_bond_detail(**overrides)
        assert str(exc_info.value) == message

    def test_grace_equal_to_deadline_allowed(self, make_bond_detail):
        detail = make_bond_detail(days_to_grace_period=720)
        assert detail.liquidity_at_maturity_only


class TestBondDetailClassification:
    """Tests for rate and liquidity classification."""

    def test_pre_fixed(self, make_bond_detail):
        detail = make_bond_detail(
            fixed_percentual_rate=Decimal("12.5"), benchmark_percentual_rate=Decimal("0")
        )
        assert detail.is_pre_fixed
        assert not detail.is_post_fixed
        assert not detail.is_hybrid

    def test_post_fixed(self, make_bond_detail):
        detail = make_bond_detail()
        assert detail.is_post_fixed
        assert not detail.is_pre_fixed
        assert not detail.is_hybrid

    def test_hybrid(self, make_bond_detail):
        detail = make_bond_detail(
            fixed_percentual_rate=Decimal("6"), benchmark_percentual_rate=Decimal("100")
        )
        assert detail.is_hybrid
        assert detail.is_post_fixed

    @pytest.mark.parametrize(
        "grace,expected",
        [(0, "Diária"), (720, "No Vencimento"), (90, "90 dias")],
    )
    def test_liquidity_description(self, make_bond_detail, grace, expected):
        assert make_bond_detail(days_to_grace_period=grace).get_liquidity_description() == expected

    @pytest.mark.parametrize(
        "days,expected",
        [
            (180, "180 dias"),
            (360, "1 ano"),
            (378, "1 ano"),
            (396, "1.1 anos"),
            (720, "2 anos"),
            (900, "2.5 anos"),
            (3600, "10 anos"),
        ],
    )
    def test_deadline_description(self, make_bond_detail, days, expected):
        detail = make_bond_detail(deadline_calendar_days=days, days_to_grace_period=0)
        assert detail.get_deadline_description() == expected

    def test_deadline_years_half_even(self, make_bond_detail):
        detail = make_bond_detail(deadline_calendar_days=378, days_to_grace_period=0)
        assert detail.deadline_calendar_years == Decimal("1.0")


class TestBondDetailMutations:
    """Tests for BondDetail updates."""

    def test_update_rates(self, make_bond_detail):
        detail = make_bond_detail()

        detail.update_rates(Decimal("0"), Decimal("13"), 0)

        assert detail.is_pre_fixed
        assert detail.has_daily_liquidity
        assert detail.last_updated_at is not None

    def test_update_rates_checks_current_deadline(self, make_bond_detail):
        detail = make_bond_detail(deadline_calendar_days=100, days_to_grace_period=10)

        with pytest.raises(DomainValidationError, match="Grace period cannot exceed deadline."):
            detail.update_rates(Decimal("100"), Decimal("0"), 101)
        assert detail.days_to_grace_period == 10

    def test_invalid_rate_leaves_state(self, make_bond_detail):
        detail = make_bond_detail()

        with pytest.raises(DomainValidationError):
            detail.update_rates(Decimal("50"), Decimal("-1"), 10)

        assert detail.benchmark_percentual_rate.value == Decimal("110")
        assert detail.days_to_grace_period == 90

    def test_other_updates(self, make_bond_detail):
        detail = make_bond_detail()

        detail.update_initial_unit_value(Decimal("500"))
        detail.update_fantasy_name("  LCI  ")
        detail.make_unavailable()

        assert detail.initial_unit_value.amount == Decimal("500")
        assert detail.fantasy_name == "LCI"
        assert not detail.is_available
        detail.make_available()
        assert detail.is_available
        with pytest.raises(DomainValidationError):
            detail.update_initial_unit_value(Decimal("-1"))

    def test_reconstitute(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        detail = BondDetail.reconstitute(
            id=9,
            fantasy_name="X",
            deadline_calendar_days=360,
            initial_unit_value=Decimal("1000"),
            benchmark_percentual_rate=Decimal("100"),
            fixed_percentual_rate=Decimal("0"),
            is_available=False,
            is_exempt_debenture=True,
            days_to_grace_period=360,
            market_index_id=1,
            bond_base_id=1,
            bond_emitter_id=1,
            created_at=created,
            last_updated_at=created,
        )

        assert detail.id == 9
        assert detail.created_at == created
        assert detail.last_updated_at == created
        assert detail.is_exempt_debenture
        assert detail.get_liquidity_description() == "No Vencimento"
