# SPDX-License-Identifier: Apache-2.0
"""Customer infrastructure adapters."""

from __future__ import annotations

from .repositories import InMemoryCustomerRepository

__all__ = ["InMemoryCustomerRepository"]
