# SPDX-License-Identifier: Apache-2.0
"""Error catalogue for the bond context."""

from __future__ import annotations

from apex.application.result import Error


class BondErrors:
    """Factories for ``Bond.*`` errors."""

    @staticmethod
    def not_found(identifier: object) -> Error:
        return Error("Bond.NotFound", f"Bond not found with identifier: {identifier}")

    @staticmethod
    def already_exists(isin: str) -> Error:
        return Error("Bond.AlreadyExists", f"Bond with ISIN '{isin}' already exists.")

    @staticmethod
    def validation_failed(message: str) -> Error:
        return Error("Bond.ValidationFailed", message)

    @staticmethod
    def invalid_query(message: str = "Either Id or ApiId must be provided.") -> Error:
        return Error("Bond.InvalidQuery", message)

    @staticmethod
    def domain_error(message: str) -> Error:
        return Error("Bond.DomainError", message)


class BondDetailErrors:
    """Factories for ``BondDetail.*`` errors."""

    @staticmethod
    def not_found(identifier: object) -> Error:
        return Error("BondDetail.NotFound", f"Bond detail not found with identifier: {identifier}")

    @staticmethod
    def validation_failed(message: str) -> Error:
        return Error("BondDetail.ValidationFailed", message)

    @staticmethod
    def domain_error(message: str) -> Error:
        return Error("BondDetail.DomainError", message)
