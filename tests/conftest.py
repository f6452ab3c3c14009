# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the Apex test suite.

FIXTURES PROVIDED:
- customer_repository / bond_repository / bond_detail_repository: fresh fakes
- make_customer / make_bond / make_bond_detail: factories with valid defaults
- today: current UTC date, the reference the domain uses for expiry
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from apex.bonds.domain.entities import Bond, BondDetail
from apex.bonds.infrastructure.repositories import InMemoryBondDetailRepository
from apex.customers.domain.entities import Company, Customer
from apex.domain.entities import utc_now
from tests.fakes.repositories import FakeBondRepository, FakeCustomerRepository

VALID_CPF = "123.456.789-01"
VALID_CNPJ = "12.345.678/0001-95"
VALID_ISIN = "BRPETRDBS036"


@pytest.fixture
def today() -> date:
    return utc_now().date()


@pytest.fixture
def customer_repository() -> FakeCustomerRepository:
    return FakeCustomerRepository()


@pytest.fixture
def bond_repository() -> FakeBondRepository:
    return FakeBondRepository()


@pytest.fixture
def bond_detail_repository() -> InMemoryBondDetailRepository:
    return InMemoryBondDetailRepository()


@pytest.fixture
def make_customer():
    """Factory for valid customers; keyword arguments override defaults."""

    def _make(**overrides) -> Customer:
        kwargs = {
            "api_id": "cust-001",
            "document": VALID_CPF,
            "company": Company.WARREN,
            "sinacor_id": "123456",
        }
        kwargs.update(overrides)
        return Customer.create(**kwargs)

    return _make


@pytest.fixture
def make_bond(today):
    """Factory for an active bond issued a year ago, expiring in a year."""

    def _make(**overrides) -> Bond:
        kwargs = {
            "symbol": "CDB-PETR-2030",
            "isin": VALID_ISIN,
            "issuance_at": today - timedelta(days=365),
            "expiration_at": today + timedelta(days=365),
        }
        kwargs.update(overrides)
        return Bond.create(**kwargs)

    return _make


@pytest.fixture
def make_bond_detail():
    """Factory for valid bond terms (720-day deadline, 90-day grace)."""

    def _make(**overrides) -> BondDetail:
        kwargs = {
            "fantasy_name": "CDB Banco X",
            "deadline_calendar_days": 720,
            "initial_unit_value": Decimal("1000.00"),
            "benchmark_percentual_rate": Decimal("110"),
            "fixed_percentual_rate": Decimal("0"),
            "is_available": True,
            "is_exempt_debenture": False,
            "days_to_grace_period": 90,
            "market_index_id": 1,
            "bond_base_id": 2,
            "bond_emitter_id": 3,
        }
        kwargs.update(overrides)
        return BondDetail.create(**kwargs)

    return _make
