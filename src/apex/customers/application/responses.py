# SPDX-License-Identifier: Apache-2.0
"""Customer response projections.

Value objects are flattened to primitives and enums are rendered by their
display names, which is the shape boundary layers serialize.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..domain.entities import Customer, CustomerExternalSystemRegister


class ExternalSystemRegisterResponse(BaseModel):
    """Projection of a customer's register in an external system."""

    model_config = ConfigDict(frozen=True)

    id: int
    status: str
    system_type: str
    created_at: datetime
    last_updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, register: CustomerExternalSystemRegister) -> "ExternalSystemRegisterResponse":
        return cls(
            id=register.id,
            status=register.status.display_name,
            system_type=register.system_type.display_name,
            created_at=register.created_at,
            last_updated_at=register.last_updated_at,
        )


class CustomerResponse(BaseModel):
    """Projection of a customer aggregate."""

    model_config = ConfigDict(frozen=True)

    id: int
    api_id: str
    document: str
    sinacor_id: Optional[str] = None
    company: str
    legacy_external_id: Optional[str] = None
    created_at: datetime
    last_updated_at: Optional[datetime] = None
    external_registers: List[ExternalSystemRegisterResponse] = []

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            api_id=customer.api_id,
            document=customer.document.value,
            sinacor_id=customer.sinacor_id,
            company=customer.company.display_name,
            legacy_external_id=customer.legacy_external_id,
            created_at=customer.created_at,
            last_updated_at=customer.last_updated_at,
            external_registers=[
                ExternalSystemRegisterResponse.from_entity(r)
                for r in customer.external_registers
            ],
        )
