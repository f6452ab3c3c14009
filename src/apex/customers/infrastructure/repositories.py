# SPDX-License-Identifier: Apache-2.0
"""In-memory customer repository."""

from __future__ import annotations

import asyncio
import copy
import logging
import re
from typing import Dict, Optional, Tuple, Union

from apex.domain.value_objects import BusinessDocument

from ..domain.entities import Company, Customer
from ..domain.repositories import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    ICustomerRepository,
)

logger = logging.getLogger(__name__)

UniquenessKey = Tuple[str, str, Company]


def _document_digits(document: Union[BusinessDocument, str]) -> str:
    if isinstance(document, BusinessDocument):
        return document.value
    return re.sub(r"[^0-9]", "", document or "")


def _key(document: Union[BusinessDocument, str], sinacor_id: Optional[str], company) -> UniquenessKey:
    return (_document_digits(document), (sinacor_id or "").strip(), Company.parse(company))


class InMemoryCustomerRepository(ICustomerRepository):
    """Customer repository backed by a dict of snapshots.

    Stored customers are deep copies, so callers always work on a freshly
    loaded aggregate and must call ``update`` to persist changes. Identity
    assignment and the uniqueness check happen under one lock.
    """

    def __init__(self):
        self._customers: Dict[int, Customer] = {}
        self._next_customer_id = 1
        self._next_register_id = 1
        self._lock = asyncio.Lock()

    async def add(self, customer: Customer) -> Customer:
        async with self._lock:
            key = _key(customer.document, customer.sinacor_id, customer.company)
            if self._find_by_key(key) is not None:
                raise DuplicateCustomerError(
                    customer.document.value, customer.sinacor_id, customer.company
                )

            customer._assign_id(self._next_customer_id)
            self._next_customer_id += 1
            for register in customer.external_registers:
                register._assign_id(self._next_register_id)
                register._attach_to_customer(customer.id)
                self._next_register_id += 1

            self._customers[customer.id] = copy.deepcopy(customer)

        logger.debug("Stored customer id=%s", customer.id)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        stored = self._customers.get(customer_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def get_by_api_id(self, api_id: str) -> Optional[Customer]:
        for stored in self._customers.values():
            if stored.api_id == api_id:
                return copy.deepcopy(stored)
        return None

    async def update(self, customer: Customer) -> None:
        async with self._lock:
            if customer.id not in self._customers:
                raise CustomerNotFoundError(customer.id)
            key = _key(customer.document, customer.sinacor_id, customer.company)
            existing = self._find_by_key(key)
            if existing is not None and existing.id != customer.id:
                raise DuplicateCustomerError(
                    customer.document.value, customer.sinacor_id, customer.company
                )
            self._customers[customer.id] = copy.deepcopy(customer)

    async def exists(
        self,
        document: Union[BusinessDocument, str],
        sinacor_id: Optional[str],
        company: Company,
    ) -> bool:
        return self._find_by_key(_key(document, sinacor_id, company)) is not None

    def _find_by_key(self, key: UniquenessKey) -> Optional[Customer]:
        for stored in self._customers.values():
            if _key(stored.document, stored.sinacor_id, stored.company) == key:
                return stored
        return None

    def __len__(self) -> int:
        return len(self._customers)
