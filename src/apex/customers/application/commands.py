# SPDX-License-Identifier: Apache-2.0
"""Customer application commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..domain.entities import Company, CustomerExternalSystemType


@dataclass(frozen=True)
class CreateCustomerCommand:
    """Command to register a new customer."""

    api_id: str
    document: str
    company: Union[Company, int, str]
    sinacor_id: Optional[str] = None
    legacy_external_id: Optional[str] = None


class RegistrationAction(str, Enum):
    """Status transition requested for an external system register."""

    REGISTER = "register"
    INACTIVATE = "inactivate"


@dataclass(frozen=True)
class UpdateCustomerRegistrationCommand:
    """Command to change a customer's status in an external system."""

    customer_id: int
    system_type: Union[CustomerExternalSystemType, int, str]
    action: Union[RegistrationAction, str] = RegistrationAction.REGISTER
