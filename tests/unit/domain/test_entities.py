# SPDX-License-Identifier: Apache-2.0
"""Unit tests for entity identity and domain enums."""

from __future__ import annotations

import pytest

from apex.bonds.domain.reference_data import MarketIndexType
from apex.customers.domain.entities import (
    Company,
    CustomerExternalSystemStatus,
    CustomerExternalSystemType,
)
from apex.domain.entities import AuditableEntity, Entity


class _Thing(Entity):
    pass


class _OtherThing(Entity):
    pass


class TestEntityIdentity:
    """Entities compare by concrete type and id only."""

    def test_unpersisted_entity(self):
        thing = _Thing()

        assert thing.id == 0
        assert not thing.exists_in_database

    def test_equality_by_type_and_id(self):
        assert _Thing(5) == _Thing(5)
        assert _Thing(5) != _Thing(6)
        assert _Thing(5) != _OtherThing(5)
        assert hash(_Thing(5)) == hash(_Thing(5))

    def test_assign_id_once(self):
        thing = _Thing()
        thing._assign_id(7)

        assert thing.id == 7
        assert thing.exists_in_database
        with pytest.raises(ValueError, match="already has id 7"):
            thing._assign_id(8)

    def test_assign_id_must_be_positive(self):
        with pytest.raises(ValueError):
            _Thing()._assign_id(0)

    def test_auditable_touch_stamps_last_updated(self):
        entity = AuditableEntity()

        assert entity.created_at is not None
        assert entity.last_updated_at is None
        entity._touch()
        assert entity.last_updated_at is not None
        assert entity.last_updated_at >= entity.created_at


class TestDomainEnum:
    """Tests for parsing and display names."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Company.RENA, Company.RENA),
            (1, Company.WARREN),
            ("2", Company.RENA),
            ("Warren", Company.WARREN),
            ("rena", Company.RENA),
            (" WARREN ", Company.WARREN),
        ],
    )
    def test_parse_company(self, value, expected):
        assert Company.parse(value) is expected

    def test_parse_multi_word_names(self):
        assert CustomerExternalSystemStatus.parse("NotRegistered") is (
            CustomerExternalSystemStatus.NOT_REGISTERED
        )
        assert CustomerExternalSystemStatus.parse("not_registered") is (
            CustomerExternalSystemStatus.NOT_REGISTERED
        )
        assert MarketIndexType.parse("IgpM") is MarketIndexType.IGP_M

    @pytest.mark.parametrize("value", ["Unknown", 3, "-1", True, None, 1.0])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError, match="Invalid Company value"):
            Company.parse(value)

    def test_display_names(self):
        assert CustomerExternalSystemStatus.NOT_REGISTERED.display_name == "NotRegistered"
        assert CustomerExternalSystemType.CETIP.display_name == "Cetip"
        assert MarketIndexType.IGP_M.display_name == "IgpM"
        assert MarketIndexType.NO_INDEX.display_name == "NoIndex"

    def test_enum_values(self):
        assert [c.value for c in Company] == [1, 2]
        assert CustomerExternalSystemType.SELIC == 1
        assert MarketIndexType.NO_INDEX == 200
