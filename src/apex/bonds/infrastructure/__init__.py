# SPDX-License-Identifier: Apache-2.0
"""Bond infrastructure adapters."""

from __future__ import annotations

from .repositories import InMemoryBondDetailRepository, InMemoryBondRepository

__all__ = ["InMemoryBondDetailRepository", "InMemoryBondRepository"]
