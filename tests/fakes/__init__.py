# SPDX-License-Identifier: Apache-2.0
"""Fake implementations for testing the application handlers."""

from __future__ import annotations

from .repositories import FakeBondRepository, FakeCustomerRepository

__all__ = ["FakeBondRepository", "FakeCustomerRepository"]
