# SPDX-License-Identifier: Apache-2.0
"""In-memory bond repositories."""

from __future__ import annotations

import asyncio
import copy
import logging
import uuid
from typing import Dict, Optional

from ..domain.entities import Bond, BondDetail
from ..domain.repositories import (
    BondDetailNotFoundError,
    BondNotFoundError,
    DuplicateBondError,
    IBondDetailRepository,
    IBondRepository,
)

logger = logging.getLogger(__name__)


class InMemoryBondRepository(IBondRepository):
    """Bond repository backed by a dict of snapshots, unique by ISIN."""

    def __init__(self):
        self._bonds: Dict[int, Bond] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, bond: Bond) -> Bond:
        async with self._lock:
            if self._find_by_isin(bond.isin.value) is not None:
                raise DuplicateBondError(bond.isin.value)
            bond._assign_id(self._next_id)
            self._next_id += 1
            self._bonds[bond.id] = copy.deepcopy(bond)
        logger.debug("Stored bond id=%s", bond.id)
        return bond

    async def get_by_id(self, bond_id: int) -> Optional[Bond]:
        stored = self._bonds.get(bond_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def get_by_api_id(self, api_id: uuid.UUID) -> Optional[Bond]:
        for stored in self._bonds.values():
            if stored.api_id == api_id:
                return copy.deepcopy(stored)
        return None

    async def update(self, bond: Bond) -> None:
        async with self._lock:
            if bond.id not in self._bonds:
                raise BondNotFoundError(bond.id)
            existing = self._find_by_isin(bond.isin.value)
            if existing is not None and existing.id != bond.id:
                raise DuplicateBondError(bond.isin.value)
            self._bonds[bond.id] = copy.deepcopy(bond)

    async def exists(self, isin: str) -> bool:
        return self._find_by_isin(isin.strip().upper()) is not None

    def _find_by_isin(self, isin: str) -> Optional[Bond]:
        for stored in self._bonds.values():
            if stored.isin.value == isin:
                return stored
        return None


class InMemoryBondDetailRepository(IBondDetailRepository):
    """Bond detail repository backed by a dict of snapshots."""

    def __init__(self):
        self._details: Dict[int, BondDetail] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, bond_detail: BondDetail) -> BondDetail:
        async with self._lock:
            bond_detail._assign_id(self._next_id)
            self._next_id += 1
            self._details[bond_detail.id] = copy.deepcopy(bond_detail)
        return bond_detail

    async def get_by_id(self, bond_detail_id: int) -> Optional[BondDetail]:
        stored = self._details.get(bond_detail_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def update(self, bond_detail: BondDetail) -> None:
        async with self._lock:
            if bond_detail.id not in self._details:
                raise BondDetailNotFoundError(bond_detail.id)
            self._details[bond_detail.id] = copy.deepcopy(bond_detail)
