# SPDX-License-Identifier: Apache-2.0
"""Bond application queries."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetBondQuery:
    """Query a bond by surrogate id or API id; the id wins when both are set."""

    id: Optional[int] = None
    api_id: Optional[uuid.UUID] = None

    @property
    def has_id(self) -> bool:
        return self.id is not None

    @property
    def has_api_id(self) -> bool:
        return self.api_id is not None and self.api_id != uuid.UUID(int=0)


@dataclass(frozen=True)
class GetBondDetailQuery:
    """Query bond terms by surrogate id."""

    id: int
