# SPDX-License-Identifier: Apache-2.0
"""Customer domain model."""

from __future__ import annotations

from .entities import (
    Company,
    Customer,
    CustomerExternalSystemRegister,
    CustomerExternalSystemStatus,
    CustomerExternalSystemType,
    InvalidCustomerOperationError,
)
from .repositories import (
    CustomerNotFoundError,
    CustomerRepositoryError,
    DuplicateCustomerError,
    ICustomerRepository,
)

__all__ = [
    "Company",
    "Customer",
    "CustomerExternalSystemRegister",
    "CustomerExternalSystemStatus",
    "CustomerExternalSystemType",
    "InvalidCustomerOperationError",
    "CustomerNotFoundError",
    "CustomerRepositoryError",
    "DuplicateCustomerError",
    "ICustomerRepository",
]
