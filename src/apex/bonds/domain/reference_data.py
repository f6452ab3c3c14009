# SPDX-License-Identifier: Apache-2.0
"""Reference entities a bond detail points at.

``BondBase`` groups bonds of the same product family, ``BondEmitter`` is the
issuer and ``MarketIndex`` is the benchmark a post-fixed bond follows. They
carry light validation only; bond details reference them by integer id.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from apex.domain.entities import UNPERSISTED_ID, AuditableEntity, DomainEnum, Entity
from apex.domain.exceptions import DomainValidationError
from apex.domain.value_objects import BusinessDocument


class CustodyChamberType(DomainEnum):
    CETIP = 1
    SELIC = 2


class CreditRating(DomainEnum):
    LOW = 10
    MEDIUM = 20
    HIGH = 30


class EmitterType(DomainEnum):
    FINANCIAL_INSTITUTION = 10
    COMPANY = 20
    INDIVIDUAL = 30
    UNION = 40
    STATE = 50
    CITY = 60


class MarketIndexType(DomainEnum):
    PRE = 0
    CDI = 10
    IPCA = 20
    SAVINGS = 30
    SELIC = 40
    IGP_M = 50
    IBOVESPA = 60
    SP500 = 70
    NO_INDEX = 200


class MarketType(DomainEnum):
    """Market in which a bond is negotiated."""

    PRIMARY = 1
    SECONDARY = 2
    IPO = 3


def _required(value: Optional[str], message: str, field: str) -> str:
    if value is None or not value.strip():
        raise DomainValidationError(message, field)
    return value.strip()


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class BondBase(Entity):
    """Product family shared by a group of bonds (e.g. CDB, LCI)."""

    BASE_SYMBOL_MAX_LENGTH = 10
    _INT16_MIN = -(2**15)
    _INT16_MAX = 2**15 - 1

    def __init__(
        self,
        base_symbol: str,
        description: str,
        type_core: int,
        custody_chamber: CustodyChamberType,
        guaranteed_by_fgc: bool = False,
        has_income_tax: bool = True,
        id: int = UNPERSISTED_ID,
    ):
        super().__init__(id)
        symbol = _required(base_symbol, "Base symbol cannot be null or empty.", "base_symbol")
        if len(symbol) > self.BASE_SYMBOL_MAX_LENGTH:
            raise DomainValidationError(
                f"Base symbol cannot exceed {self.BASE_SYMBOL_MAX_LENGTH} characters.",
                "base_symbol",
            )
        if not self._INT16_MIN <= type_core <= self._INT16_MAX:
            raise DomainValidationError(
                f"Type core must fit in 16 bits, got {type_core}.", "type_core"
            )
        self._base_symbol = symbol.upper()
        self._description = _required(
            description, "Description cannot be null or empty.", "description"
        )
        self._type_core = type_core
        self._custody_chamber = CustodyChamberType.parse(custody_chamber)
        self._guaranteed_by_fgc = guaranteed_by_fgc
        self._has_income_tax = has_income_tax

    @classmethod
    def create(
        cls,
        base_symbol: str,
        description: str,
        type_core: int,
        custody_chamber: CustodyChamberType,
        guaranteed_by_fgc: bool = False,
        has_income_tax: bool = True,
    ) -> BondBase:
        return cls(base_symbol, description, type_core, custody_chamber, guaranteed_by_fgc, has_income_tax)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        base_symbol: str,
        description: str,
        type_core: int,
        custody_chamber: CustodyChamberType,
        guaranteed_by_fgc: bool,
        has_income_tax: bool,
    ) -> BondBase:
        return cls(base_symbol, description, type_core, custody_chamber, guaranteed_by_fgc, has_income_tax, id)

    @property
    def base_symbol(self) -> str:
        return self._base_symbol

    @property
    def description(self) -> str:
        return self._description

    @property
    def type_core(self) -> int:
        return self._type_core

    @property
    def custody_chamber(self) -> CustodyChamberType:
        return self._custody_chamber

    @property
    def guaranteed_by_fgc(self) -> bool:
        return self._guaranteed_by_fgc

    @property
    def has_income_tax(self) -> bool:
        return self._has_income_tax

    @property
    def is_cetip_custody(self) -> bool:
        return self._custody_chamber is CustodyChamberType.CETIP

    @property
    def is_selic_custody(self) -> bool:
        return self._custody_chamber is CustodyChamberType.SELIC

    def update(self, description: str, guaranteed_by_fgc: bool, has_income_tax: bool) -> None:
        self._description = _required(
            description, "Description cannot be null or empty.", "description"
        )
        self._guaranteed_by_fgc = guaranteed_by_fgc
        self._has_income_tax = has_income_tax


class BondEmitter(AuditableEntity):
    """Issuer of bonds, identified by its CNPJ or CPF."""

    _EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __init__(
        self,
        issuer: str,
        name: str,
        full_name: str,
        business_document: str,
        credit_rating: CreditRating,
        issuer_type: EmitterType,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
    ):
        super().__init__(id, created_at, last_updated_at)
        self._issuer = _required(issuer, "Issuer code cannot be null or empty.", "issuer")
        self._name = _required(name, "Name cannot be null or empty.", "name")
        self._full_name = _required(full_name, "Full name cannot be null or empty.", "full_name")
        self._business_document = BusinessDocument.create(business_document)
        self._email = self._validate_email(email)
        self._credit_rating = CreditRating.parse(credit_rating)
        self._issuer_type = EmitterType.parse(issuer_type)
        self._external_id = _optional(external_id)

    @classmethod
    def create(
        cls,
        issuer: str,
        name: str,
        full_name: str,
        business_document: str,
        credit_rating: CreditRating,
        issuer_type: EmitterType,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
    ) -> BondEmitter:
        return cls(issuer, name, full_name, business_document, credit_rating, issuer_type, email, external_id)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        issuer: str,
        name: str,
        full_name: str,
        business_document: str,
        credit_rating: CreditRating,
        issuer_type: EmitterType,
        email: Optional[str],
        external_id: Optional[str],
        created_at: datetime,
        last_updated_at: Optional[datetime] = None,
    ) -> BondEmitter:
        return cls(
            issuer, name, full_name, business_document, credit_rating, issuer_type,
            email, external_id, id, created_at, last_updated_at,
        )

    @classmethod
    def _validate_email(cls, email: Optional[str]) -> Optional[str]:
        email = _optional(email)
        if email is not None and not cls._EMAIL_PATTERN.match(email):
            raise DomainValidationError("Invalid email format.", "email")
        return email

    @property
    def issuer(self) -> str:
        return self._issuer

    @property
    def name(self) -> str:
        return self._name

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def business_document(self) -> BusinessDocument:
        return self._business_document

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def credit_rating(self) -> CreditRating:
        return self._credit_rating

    @property
    def issuer_type(self) -> EmitterType:
        return self._issuer_type

    @property
    def external_id(self) -> Optional[str]:
        return self._external_id

    @property
    def is_financial_institution(self) -> bool:
        return self._issuer_type is EmitterType.FINANCIAL_INSTITUTION

    @property
    def is_company(self) -> bool:
        return self._issuer_type is EmitterType.COMPANY

    @property
    def is_government(self) -> bool:
        return self._issuer_type in (EmitterType.UNION, EmitterType.STATE, EmitterType.CITY)

    @property
    def is_high_credit_rating(self) -> bool:
        return self._credit_rating is CreditRating.HIGH

    @property
    def is_investment_grade(self) -> bool:
        return self._credit_rating in (CreditRating.MEDIUM, CreditRating.HIGH)

    def update(
        self,
        name: str,
        full_name: str,
        email: Optional[str],
        credit_rating: CreditRating,
    ) -> None:
        """Replace the descriptive fields and the rating in one step."""
        self._name = _required(name, "Name cannot be null or empty.", "name")
        self._full_name = _required(full_name, "Full name cannot be null or empty.", "full_name")
        self._email = self._validate_email(email)
        self._credit_rating = CreditRating.parse(credit_rating)
        self._touch()

    def update_credit_rating(self, credit_rating: CreditRating) -> None:
        self._credit_rating = CreditRating.parse(credit_rating)
        self._touch()


class MarketIndex(Entity):
    """Benchmark index such as CDI or IPCA."""

    def __init__(
        self,
        name: str,
        description: str,
        market_index_type: MarketIndexType,
        virtual_index_name: Optional[str] = None,
        cetip_index_name: Optional[str] = None,
        id: int = UNPERSISTED_ID,
    ):
        super().__init__(id)
        self._name = _required(name, "Market index name cannot be null or empty.", "name")
        self._description = _required(
            description, "Market index description cannot be null or empty.", "description"
        )
        self._market_index_type = MarketIndexType.parse(market_index_type)
        self._virtual_index_name = _optional(virtual_index_name)
        self._cetip_index_name = _optional(cetip_index_name)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        market_index_type: MarketIndexType,
        virtual_index_name: Optional[str] = None,
        cetip_index_name: Optional[str] = None,
    ) -> MarketIndex:
        return cls(name, description, market_index_type, virtual_index_name, cetip_index_name)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        description: str,
        market_index_type: MarketIndexType,
        virtual_index_name: Optional[str],
        cetip_index_name: Optional[str],
    ) -> MarketIndex:
        return cls(name, description, market_index_type, virtual_index_name, cetip_index_name, id)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def market_index_type(self) -> MarketIndexType:
        return self._market_index_type

    @property
    def virtual_index_name(self) -> Optional[str]:
        return self._virtual_index_name

    @property
    def cetip_index_name(self) -> Optional[str]:
        return self._cetip_index_name

    @property
    def is_pre_fixed(self) -> bool:
        return self._market_index_type is MarketIndexType.PRE

    @property
    def is_post_fixed(self) -> bool:
        return self._market_index_type not in (MarketIndexType.PRE, MarketIndexType.NO_INDEX)

    @property
    def is_inflation_linked(self) -> bool:
        return self._market_index_type in (MarketIndexType.IPCA, MarketIndexType.IGP_M)

    def update(
        self,
        name: str,
        description: str,
        virtual_index_name: Optional[str] = None,
        cetip_index_name: Optional[str] = None,
    ) -> None:
        self._name = _required(name, "Market index name cannot be null or empty.", "name")
        self._description = _required(
            description, "Market index description cannot be null or empty.", "description"
        )
        self._virtual_index_name = _optional(virtual_index_name)
        self._cetip_index_name = _optional(cetip_index_name)
