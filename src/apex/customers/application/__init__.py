# SPDX-License-Identifier: Apache-2.0
"""Customer application layer."""

from __future__ import annotations

from .commands import CreateCustomerCommand, RegistrationAction, UpdateCustomerRegistrationCommand
from .errors import CustomerErrors
from .queries import GetCustomerQuery
from .responses import CustomerResponse, ExternalSystemRegisterResponse
from .services import CreateCustomerHandler, GetCustomerHandler, UpdateCustomerRegistrationHandler

__all__ = [
    "CreateCustomerCommand",
    "RegistrationAction",
    "UpdateCustomerRegistrationCommand",
    "CustomerErrors",
    "GetCustomerQuery",
    "CustomerResponse",
    "ExternalSystemRegisterResponse",
    "CreateCustomerHandler",
    "GetCustomerHandler",
    "UpdateCustomerRegistrationHandler",
]
