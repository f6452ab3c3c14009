# SPDX-License-Identifier: Apache-2.0
"""Bond domain repository interfaces."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from .entities import Bond, BondDetail


class IBondRepository(ABC):
    """Repository interface for bonds. ISINs are unique."""

    @abstractmethod
    async def add(self, bond: Bond) -> Bond:
        """Persist a new bond and return it with its identity assigned."""
        pass

    @abstractmethod
    async def get_by_id(self, bond_id: int) -> Optional[Bond]:
        """Retrieve a bond by its surrogate key."""
        pass

    @abstractmethod
    async def get_by_api_id(self, api_id: uuid.UUID) -> Optional[Bond]:
        """Retrieve a bond by its external API identifier."""
        pass

    @abstractmethod
    async def update(self, bond: Bond) -> None:
        """Persist changes to an existing bond."""
        pass

    @abstractmethod
    async def exists(self, isin: str) -> bool:
        """Check whether a bond with the given ISIN already exists."""
        pass


class IBondDetailRepository(ABC):
    """Repository interface for bond details."""

    @abstractmethod
    async def add(self, bond_detail: BondDetail) -> BondDetail:
        """Persist new bond terms and return them with their identity assigned."""
        pass

    @abstractmethod
    async def get_by_id(self, bond_detail_id: int) -> Optional[BondDetail]:
        """Retrieve bond terms by surrogate key."""
        pass

    @abstractmethod
    async def update(self, bond_detail: BondDetail) -> None:
        """Persist changes to existing bond terms."""
        pass


class BondRepositoryError(Exception):
    """Base exception for bond repository errors."""

    pass


class BondNotFoundError(BondRepositoryError):
    """Raised when a bond to update is not stored."""

    def __init__(self, identifier: object):
        super().__init__(f"Bond not found with identifier: {identifier}")
        self.identifier = identifier


class BondDetailNotFoundError(BondRepositoryError):
    """Raised when a bond detail to update is not stored."""

    def __init__(self, identifier: object):
        super().__init__(f"Bond detail not found with identifier: {identifier}")
        self.identifier = identifier


class DuplicateBondError(BondRepositoryError):
    """Raised when storing a bond would duplicate an ISIN."""

    def __init__(self, isin: str):
        super().__init__(f"Bond with ISIN '{isin}' already exists.")
        self.isin = isin
