# SPDX-License-Identifier: Apache-2.0
"""Error catalogue for the customer context."""

from __future__ import annotations

from typing import Optional

from apex.application.result import Error


class CustomerErrors:
    """Factories for ``Customer.*`` errors."""

    @staticmethod
    def not_found(identifier: object) -> Error:
        return Error("Customer.NotFound", f"Customer not found with identifier: {identifier}")

    @staticmethod
    def already_exists(document: str, sinacor_id: Optional[str], company: str) -> Error:
        return Error(
            "Customer.AlreadyExists",
            f"Customer with document '{document}', Sinacor ID '{sinacor_id or ''}' "
            f"and company '{company}' already exists.",
        )

    @staticmethod
    def validation_failed(message: str) -> Error:
        return Error("Customer.ValidationFailed", message)

    @staticmethod
    def invalid_query(message: str = "Either Id or ApiId must be provided.") -> Error:
        return Error("Customer.InvalidQuery", message)

    @staticmethod
    def domain_error(message: str) -> Error:
        return Error("Customer.DomainError", message)
