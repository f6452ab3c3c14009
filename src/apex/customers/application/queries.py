# SPDX-License-Identifier: Apache-2.0
"""Customer application queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetCustomerQuery:
    """Query a single customer by surrogate id or by API id.

    When both are given the surrogate id wins.
    """

    id: Optional[int] = None
    api_id: Optional[str] = None

    @property
    def has_id(self) -> bool:
        return self.id is not None

    @property
    def has_api_id(self) -> bool:
        return self.api_id is not None and bool(self.api_id.strip())
