# SPDX-License-Identifier: Apache-2.0
"""Customer domain repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from apex.domain.value_objects import BusinessDocument

from .entities import Company, Customer


class ICustomerRepository(ABC):
    """Repository interface for customers.

    Implementations must enforce uniqueness of
    ``(document, sinacor_id, company)`` at write time and raise
    ``DuplicateCustomerError`` when it is violated, even if an earlier
    ``exists`` check returned False.
    """

    @abstractmethod
    async def add(self, customer: Customer) -> Customer:
        """Persist a new customer and return it with its identity assigned."""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by its surrogate key."""
        pass

    @abstractmethod
    async def get_by_api_id(self, api_id: str) -> Optional[Customer]:
        """Retrieve a customer by its external API identifier."""
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> None:
        """Persist changes to an existing customer."""
        pass

    @abstractmethod
    async def exists(
        self,
        document: Union[BusinessDocument, str],
        sinacor_id: Optional[str],
        company: Company,
    ) -> bool:
        """Check whether a customer with the uniqueness key already exists."""
        pass


class CustomerRepositoryError(Exception):
    """Base exception for customer repository errors."""

    pass


class CustomerNotFoundError(CustomerRepositoryError):
    """Raised when a customer is not found."""

    def __init__(self, identifier: object):
        super().__init__(f"Customer not found with identifier: {identifier}")
        self.identifier = identifier


class DuplicateCustomerError(CustomerRepositoryError):
    """Raised when storing a customer would break the uniqueness key."""

    def __init__(self, document: str, sinacor_id: Optional[str], company: Company):
        super().__init__(
            f"Customer with document '{document}', Sinacor ID '{sinacor_id or ''}' "
            f"and company '{Company.parse(company).display_name}' already exists."
        )
        self.document = document
        self.sinacor_id = sinacor_id
        self.company = company
