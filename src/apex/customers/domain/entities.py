# SPDX-License-Identifier: Apache-2.0
"""Customer aggregate and its external system registers."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from apex.domain.entities import UNPERSISTED_ID, AuditableEntity, DomainEnum
from apex.domain.exceptions import DomainException, DomainValidationError
from apex.domain.value_objects import BusinessDocument


class Company(DomainEnum):
    """Brokerage company that owns the customer relationship."""

    WARREN = 1
    RENA = 2


class CustomerExternalSystemType(DomainEnum):
    """Clearing and custody systems a customer must be registered with."""

    CETIP = 0
    SELIC = 1


class CustomerExternalSystemStatus(DomainEnum):
    """Registration status of a customer in an external system."""

    NOT_REGISTERED = 0
    REGISTERED = 1
    INACTIVE = 2


class InvalidCustomerOperationError(DomainException):
    """Raised when an operation is not allowed for the customer's state."""

    pass


class CustomerExternalSystemRegister(AuditableEntity):
    """Registration of a customer in one external system.

    Owned by ``Customer``; created alongside the parent and never removed on
    its own. The system type never changes after creation.
    """

    def __init__(
        self,
        system_type: CustomerExternalSystemType,
        status: CustomerExternalSystemStatus = CustomerExternalSystemStatus.NOT_REGISTERED,
        customer_id: int = UNPERSISTED_ID,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
    ):
        super().__init__(id, created_at, last_updated_at)
        self._system_type = CustomerExternalSystemType.parse(system_type)
        self._status = CustomerExternalSystemStatus.parse(status)
        self._customer_id = customer_id

    @classmethod
    def create(
        cls, system_type: CustomerExternalSystemType, customer_id: int = UNPERSISTED_ID
    ) -> CustomerExternalSystemRegister:
        """Create a new register in the NotRegistered state."""
        return cls(system_type, CustomerExternalSystemStatus.NOT_REGISTERED, customer_id)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        customer_id: int,
        system_type: CustomerExternalSystemType,
        status: CustomerExternalSystemStatus,
        created_at: datetime,
        last_updated_at: Optional[datetime] = None,
    ) -> CustomerExternalSystemRegister:
        """Restore a persisted register without touching its audit fields."""
        return cls(system_type, status, customer_id, id, created_at, last_updated_at)

    @property
    def system_type(self) -> CustomerExternalSystemType:
        return self._system_type

    @property
    def status(self) -> CustomerExternalSystemStatus:
        return self._status

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def is_registered(self) -> bool:
        return self._status is CustomerExternalSystemStatus.REGISTERED

    @property
    def is_active(self) -> bool:
        # Only a registered customer can operate in the external system
        return self.is_registered

    @property
    def is_not_registered(self) -> bool:
        return self._status is CustomerExternalSystemStatus.NOT_REGISTERED

    @property
    def is_inactive(self) -> bool:
        return self._status is CustomerExternalSystemStatus.INACTIVE

    def mark_as_registered(self) -> None:
        self.update_status(CustomerExternalSystemStatus.REGISTERED)

    def mark_as_inactive(self) -> None:
        self.update_status(CustomerExternalSystemStatus.INACTIVE)

    def mark_as_not_registered(self) -> None:
        self.update_status(CustomerExternalSystemStatus.NOT_REGISTERED)

    def update_status(self, status: CustomerExternalSystemStatus) -> None:
        """Set the status; repeating the current status is allowed."""
        self._status = CustomerExternalSystemStatus.parse(status)
        self._touch()

    def _attach_to_customer(self, customer_id: int) -> None:
        self._customer_id = customer_id

    def __repr__(self) -> str:
        return (
            f"CustomerExternalSystemRegister(id={self.id}, "
            f"system_type={self._system_type.display_name}, "
            f"status={self._status.display_name})"
        )


class Customer(AuditableEntity):
    """Customer aggregate root.

    A customer is identified externally by ``api_id`` and for uniqueness by
    the ``(document, sinacor_id, company)`` triple, which persistence
    enforces. Every customer owns exactly one register per external system
    type, seeded as NotRegistered when the customer is created.
    """

    API_ID_MAX_LENGTH = 32
    SINACOR_ID_MAX_LENGTH = 9
    LEGACY_EXTERNAL_ID_MAX_LENGTH = 9

    def __init__(
        self,
        api_id: str,
        document: BusinessDocument,
        company: Company,
        sinacor_id: Optional[str] = None,
        legacy_external_id: Optional[str] = None,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
        external_registers: Optional[Iterable[CustomerExternalSystemRegister]] = None,
    ):
        super().__init__(id, created_at, last_updated_at)
        self._api_id = self._validate_api_id(api_id)
        self._document = document
        self._company = Company.parse(company)
        self._sinacor_id = self._validate_optional_id(
            sinacor_id, self.SINACOR_ID_MAX_LENGTH, "Sinacor ID", "sinacor_id"
        )
        self._legacy_external_id = self._validate_optional_id(
            legacy_external_id,
            self.LEGACY_EXTERNAL_ID_MAX_LENGTH,
            "Legacy External ID",
            "legacy_external_id",
        )
        self._external_registers: List[CustomerExternalSystemRegister] = []
        for register in external_registers or ():
            if self.get_register_for_system(register.system_type) is not None:
                raise InvalidCustomerOperationError(
                    f"Duplicate register for system type {register.system_type.display_name}."
                )
            self._external_registers.append(register)

    @classmethod
    def create(
        cls,
        api_id: str,
        document: str,
        company: Company,
        sinacor_id: Optional[str] = None,
        legacy_external_id: Optional[str] = None,
    ) -> Customer:
        """Create a new customer with one NotRegistered register per system.

        Args:
            api_id: External API identifier (required, up to 32 characters)
            document: CPF or CNPJ, masked or digits only
            company: Owning company
            sinacor_id: Optional Sinacor back-office id (up to 9 characters)
            legacy_external_id: Optional legacy id (up to 9 characters)

        Raises:
            DomainValidationError: If any field is invalid
        """
        registers = [
            CustomerExternalSystemRegister.create(CustomerExternalSystemType.CETIP),
            CustomerExternalSystemRegister.create(CustomerExternalSystemType.SELIC),
        ]
        return cls(
            api_id=api_id,
            document=BusinessDocument.create(document),
            company=company,
            sinacor_id=sinacor_id,
            legacy_external_id=legacy_external_id,
            external_registers=registers,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        api_id: str,
        document: str,
        company: Company,
        sinacor_id: Optional[str],
        legacy_external_id: Optional[str],
        created_at: datetime,
        last_updated_at: Optional[datetime] = None,
        external_registers: Optional[Iterable[CustomerExternalSystemRegister]] = None,
    ) -> Customer:
        """Restore a persisted customer, re-validating its fields.

        Registers are taken as given; two registers for the same system type
        are rejected.
        """
        return cls(
            api_id=api_id,
            document=BusinessDocument.create(document),
            company=company,
            sinacor_id=sinacor_id,
            legacy_external_id=legacy_external_id,
            id=id,
            created_at=created_at,
            last_updated_at=last_updated_at,
            external_registers=external_registers,
        )

    @staticmethod
    def _validate_api_id(api_id: Optional[str]) -> str:
        if api_id is None or not api_id.strip():
            raise DomainValidationError("API ID cannot be null or empty.", "api_id")
        trimmed = api_id.strip()
        if len(trimmed) > Customer.API_ID_MAX_LENGTH:
            raise DomainValidationError(
                f"API ID cannot exceed {Customer.API_ID_MAX_LENGTH} characters.", "api_id"
            )
        return trimmed

    @staticmethod
    def _validate_optional_id(
        value: Optional[str], max_length: int, label: str, field: str
    ) -> Optional[str]:
        if value is None or not value.strip():
            return None
        trimmed = value.strip()
        if len(trimmed) > max_length:
            raise DomainValidationError(f"{label} cannot exceed {max_length} characters.", field)
        return trimmed

    # Properties

    @property
    def api_id(self) -> str:
        return self._api_id

    @property
    def document(self) -> BusinessDocument:
        return self._document

    @property
    def sinacor_id(self) -> Optional[str]:
        return self._sinacor_id

    @property
    def company(self) -> Company:
        return self._company

    @property
    def legacy_external_id(self) -> Optional[str]:
        return self._legacy_external_id

    @property
    def external_registers(self) -> List[CustomerExternalSystemRegister]:
        """Registers owned by this customer (a copy of the list)."""
        return list(self._external_registers)

    @property
    def has_sinacor_id(self) -> bool:
        return self._sinacor_id is not None

    @property
    def has_legacy_external_id(self) -> bool:
        return self._legacy_external_id is not None

    @property
    def is_warren_customer(self) -> bool:
        return self._company is Company.WARREN

    @property
    def is_rena_customer(self) -> bool:
        return self._company is Company.RENA

    @property
    def is_individual(self) -> bool:
        return self._document.is_cpf

    @property
    def is_legal_entity(self) -> bool:
        return self._document.is_cnpj

    @property
    def is_registered_in_cetip(self) -> bool:
        return self.is_registered_in(CustomerExternalSystemType.CETIP)

    @property
    def is_registered_in_selic(self) -> bool:
        return self.is_registered_in(CustomerExternalSystemType.SELIC)

    # Mutations

    def update_api_id(self, api_id: str) -> None:
        self._api_id = self._validate_api_id(api_id)
        self._touch()

    def update_sinacor_id(self, sinacor_id: Optional[str]) -> None:
        self._sinacor_id = self._validate_optional_id(
            sinacor_id, self.SINACOR_ID_MAX_LENGTH, "Sinacor ID", "sinacor_id"
        )
        self._touch()

    def update_company(self, company: Company) -> None:
        self._company = Company.parse(company)
        self._touch()

    def update_document(self, document: str) -> None:
        self._document = BusinessDocument.create(document)
        self._touch()

    def update_legacy_external_id(self, legacy_external_id: Optional[str]) -> None:
        self._legacy_external_id = self._validate_optional_id(
            legacy_external_id,
            self.LEGACY_EXTERNAL_ID_MAX_LENGTH,
            "Legacy External ID",
            "legacy_external_id",
        )
        self._touch()

    # External system registers

    def get_register_for_system(
        self, system_type: CustomerExternalSystemType
    ) -> Optional[CustomerExternalSystemRegister]:
        system_type = CustomerExternalSystemType.parse(system_type)
        for register in self._external_registers:
            if register.system_type is system_type:
                return register
        return None

    def get_cetip_register(self) -> Optional[CustomerExternalSystemRegister]:
        return self.get_register_for_system(CustomerExternalSystemType.CETIP)

    def get_selic_register(self) -> Optional[CustomerExternalSystemRegister]:
        return self.get_register_for_system(CustomerExternalSystemType.SELIC)

    def is_registered_in(self, system_type: CustomerExternalSystemType) -> bool:
        register = self.get_register_for_system(system_type)
        return register is not None and register.is_registered

    def mark_as_registered_in(self, system_type: CustomerExternalSystemType) -> None:
        """Mark the customer as registered in an external system.

        Raises:
            InvalidCustomerOperationError: If no register exists for the type
        """
        self._require_register(system_type).mark_as_registered()
        self._touch()

    def mark_as_inactive_in(self, system_type: CustomerExternalSystemType) -> None:
        """Mark the customer as inactive in an external system.

        Raises:
            InvalidCustomerOperationError: If no register exists for the type
        """
        self._require_register(system_type).mark_as_inactive()
        self._touch()

    def _require_register(
        self, system_type: CustomerExternalSystemType
    ) -> CustomerExternalSystemRegister:
        register = self.get_register_for_system(system_type)
        if register is None:
            raise InvalidCustomerOperationError(
                f"No register found for system type {system_type.display_name}."
            )
        return register

    def __repr__(self) -> str:
        return (
            f"Customer(id={self.id}, api_id={self._api_id!r}, "
            f"company={self._company.display_name})"
        )
