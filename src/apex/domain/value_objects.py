# SPDX-License-Identifier: Apache-2.0
"""Domain value objects for Apex.

Value Objects are immutable objects that are defined by their values rather
than their identity. Each one validates itself on construction, so holding
an instance is proof that the wrapped value is well formed. The ``create``
factories are the public entry point; they normalize raw input (trimming,
upper-casing, stripping masks) before construction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from .entities import utc_now
from .exceptions import DomainValidationError

Numeric = Union[Decimal, int, float, str]
DateLike = Union[date, datetime]

# Banking-year convention used for every duration expressed in years
DAYS_PER_YEAR = Decimal("360")


def _to_decimal(value: Numeric, field: str) -> Decimal:
    """Convert a numeric input to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise DomainValidationError(f"{field} must be numeric, got bool", field)
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise DomainValidationError(f"{field} must be numeric, got {value!r}", field) from e


def as_date(value: DateLike) -> date:
    """Calendar date part of a date or datetime."""
    return value.date() if isinstance(value, datetime) else value


def comparable_dates(first: DateLike, second: DateLike) -> tuple[DateLike, DateLike]:
    """Return the pair in a form that can be ordered.

    Two datetimes (or two dates) are compared as given; a date mixed with a
    datetime is compared on calendar dates.
    """
    if isinstance(first, datetime) and isinstance(second, datetime):
        return first, second
    return as_date(first), as_date(second)


class BusinessDocumentType(Enum):
    """Brazilian taxpayer document kinds."""

    CPF = "Cpf"
    CNPJ = "Cnpj"


@dataclass(frozen=True)
class BusinessDocument:
    """Brazilian business document value object (CPF or CNPJ).

    Stores digits only. The type is inferred from the digit count:
    11 digits is a CPF (individual), 14 digits is a CNPJ (legal entity).
    """

    CPF_LENGTH = 11
    CNPJ_LENGTH = 14

    value: str
    type: BusinessDocumentType

    def __post_init__(self):
        """Validate that the digits match the declared document type."""
        if not self.value or not self.value.isascii() or not self.value.isdigit():
            raise DomainValidationError(
                "Business document must contain only digits.", "document"
            )
        expected = self.CPF_LENGTH if self.type is BusinessDocumentType.CPF else self.CNPJ_LENGTH
        if len(self.value) != expected:
            raise DomainValidationError(
                f"{self.type.value.upper()} must have {expected} digits.", "document"
            )

    @classmethod
    def create(cls, value: Optional[str]) -> BusinessDocument:
        """Create a document from raw input, detecting CPF or CNPJ.

        Any mask characters (dots, dashes, slashes, spaces) are discarded.

        Args:
            value: Document number, masked or digits only

        Returns:
            BusinessDocument value object

        Raises:
            DomainValidationError: If empty or not 11/14 digits long
        """
        if value is None or not str(value).strip():
            raise DomainValidationError("Business document cannot be null or empty.", "document")

        digits = re.sub(r"[^0-9]", "", str(value))

        if len(digits) not in (cls.CPF_LENGTH, cls.CNPJ_LENGTH):
            raise DomainValidationError(
                f"Business document must have {cls.CPF_LENGTH} (CPF) or "
                f"{cls.CNPJ_LENGTH} (CNPJ) digits.",
                "document",
            )

        doc_type = BusinessDocumentType.CNPJ if len(digits) == cls.CNPJ_LENGTH else BusinessDocumentType.CPF
        return cls(digits, doc_type)

    @property
    def is_cpf(self) -> bool:
        """Whether this document identifies an individual."""
        return self.type is BusinessDocumentType.CPF

    @property
    def is_cnpj(self) -> bool:
        """Whether this document identifies a legal entity."""
        return self.type is BusinessDocumentType.CNPJ

    def format_with_mask(self) -> str:
        """Format with the standard mask.

        CPF: ``000.000.000-00``; CNPJ: ``00.000.000/0000-00``.
        """
        v = self.value
        if self.is_cpf:
            return f"{v[0:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"
        return f"{v[0:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:14]}"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BondSymbol:
    """Bond trading symbol value object (1-50 characters, trimmed)."""

    MAX_LENGTH = 50

    value: str

    def __post_init__(self):
        """Validate and normalize the symbol."""
        if self.value is None or not str(self.value).strip():
            raise DomainValidationError("Bond symbol cannot be null or empty.", "symbol")

        trimmed = str(self.value).strip()
        if len(trimmed) > self.MAX_LENGTH:
            raise DomainValidationError(
                f"Bond symbol cannot exceed {self.MAX_LENGTH} characters.", "symbol"
            )
        object.__setattr__(self, "value", trimmed)

    @classmethod
    def create(cls, value: Optional[str]) -> BondSymbol:
        """Create a bond symbol from raw input."""
        return cls(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Isin:
    """International Securities Identification Number.

    Exactly 12 characters: a two-letter country code followed by ten
    alphanumerics (nine body characters plus a check digit). Stored
    upper-cased.
    """

    LENGTH = 12
    _PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{10}$")

    value: str

    def __post_init__(self):
        """Validate and normalize the ISIN."""
        if self.value is None or not str(self.value).strip():
            raise DomainValidationError("ISIN cannot be null or empty.", "isin")

        normalized = str(self.value).strip().upper()

        if len(normalized) != self.LENGTH:
            raise DomainValidationError(
                f"ISIN must be exactly {self.LENGTH} characters long.", "isin"
            )

        if not self._PATTERN.match(normalized):
            raise DomainValidationError(
                "ISIN format is invalid. Must start with 2 letters followed by "
                "10 alphanumeric characters.",
                "isin",
            )

        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, value: Optional[str]) -> Isin:
        """Create an ISIN from raw input."""
        return cls(value)  # type: ignore[arg-type]

    @property
    def country_code(self) -> str:
        """Two-letter country prefix."""
        return self.value[:2]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Rate:
    """Interest rate expressed in percentage points (10.5 means 10.5%).

    Valid range is 0 to 1000 inclusive.
    """

    MAX_VALUE = Decimal("1000")

    value: Decimal

    def __post_init__(self):
        """Convert to Decimal and validate the range."""
        value = _to_decimal(self.value, "rate")
        if value < 0:
            raise DomainValidationError("Rate cannot be negative.", "rate")
        if value > self.MAX_VALUE:
            raise DomainValidationError("Rate cannot exceed 1000%.", "rate")
        object.__setattr__(self, "value", value)

    @classmethod
    def create(cls, value: Numeric) -> Rate:
        """Create a rate from a percentage value."""
        return cls(value)  # type: ignore[arg-type]

    @classmethod
    def zero(cls) -> Rate:
        """Create a zero rate."""
        return cls(Decimal("0"))

    @property
    def is_zero(self) -> bool:
        """Whether the rate is zero."""
        return self.value == 0

    def format_for_display(self, decimal_places: int = 2) -> str:
        """Format as a percentage string, e.g. ``10.50%``."""
        return f"{self.value:.{decimal_places}f}%"

    def __str__(self) -> str:
        return self.format_for_display()


@dataclass(frozen=True)
class Money:
    """Monetary amount in BRL (Brazilian Real).

    Supports addition and subtraction between amounts, and multiplication or
    division by a scalar factor. Amounts may become negative through
    arithmetic; entities that require a non-negative value check it
    themselves.
    """

    amount: Decimal

    def __post_init__(self):
        """Convert the amount to Decimal."""
        object.__setattr__(self, "amount", _to_decimal(self.amount, "amount"))

    @classmethod
    def create(cls, amount: Numeric) -> Money:
        """Create a money amount."""
        return cls(amount)  # type: ignore[arg-type]

    @classmethod
    def zero(cls) -> Money:
        """Create a zero amount."""
        return cls(Decimal("0"))

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def __add__(self, other: Money) -> Money:
        """Add two amounts."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        """Subtract two amounts."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount - other.amount)

    def __mul__(self, factor: Numeric) -> Money:
        """Multiply the amount by a scalar factor."""
        if isinstance(factor, Money):
            return NotImplemented
        return Money(self.amount * _to_decimal(factor, "factor"))

    def __rmul__(self, factor: Numeric) -> Money:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Numeric) -> Money:
        """Divide the amount by a non-zero scalar."""
        if isinstance(divisor, Money):
            return NotImplemented
        divisor_decimal = _to_decimal(divisor, "divisor")
        if divisor_decimal == 0:
            raise ZeroDivisionError("Cannot divide money by zero.")
        return Money(self.amount / divisor_decimal)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    def format_for_display(self) -> str:
        """Format with the BRL symbol and Brazilian grouping: ``R$ 1.234,56``."""
        rounded = self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        # en-US grouping first, then swap separators
        formatted = f"{rounded:,.2f}"
        formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"R$ {formatted}"

    def __str__(self) -> str:
        return self.format_for_display()


@dataclass(frozen=True)
class DateRange:
    """Period between a start and an end date (end may equal start).

    Durations in years follow the 360-day banking convention.
    """

    start_date: DateLike
    end_date: DateLike

    def __post_init__(self):
        """Validate that the range is not inverted."""
        start, end = comparable_dates(self.start_date, self.end_date)
        if end < start:
            raise DomainValidationError("End date cannot be before start date.", "end_date")

    @classmethod
    def create(cls, start_date: DateLike, end_date: DateLike) -> DateRange:
        """Create a date range."""
        return cls(start_date, end_date)

    @property
    def duration_in_days(self) -> int:
        """Calendar days between start and end."""
        return (as_date(self.end_date) - as_date(self.start_date)).days

    @property
    def duration_in_years(self) -> Decimal:
        """Duration in years using a 360-day year."""
        return Decimal(self.duration_in_days) / DAYS_PER_YEAR

    @property
    def has_expired(self) -> bool:
        """Whether the end date is before today (UTC)."""
        return as_date(self.end_date) < utc_now().date()

    @property
    def is_active(self) -> bool:
        """Whether today falls between start and end (UTC)."""
        return not self.has_expired and as_date(self.start_date) <= utc_now().date()

    def get_remaining_days(self) -> int:
        """Days left until the end date, or 0 when already past."""
        return max(0, (as_date(self.end_date) - utc_now().date()).days)

    def __str__(self) -> str:
        return f"{as_date(self.start_date):%Y-%m-%d} to {as_date(self.end_date):%Y-%m-%d}"
