# SPDX-License-Identifier: Apache-2.0
"""Customer application services.

Each handler turns a command or query into a ``Result``. Validation errors
and business rule violations become failures; anything unexpected,
cancellation included, propagates to the caller.
"""

from __future__ import annotations

import logging

from apex.application.result import Result
from apex.domain.exceptions import DomainException, DomainValidationError

from ..domain.entities import Company, Customer, CustomerExternalSystemType
from ..domain.repositories import DuplicateCustomerError, ICustomerRepository
from .commands import (
    CreateCustomerCommand,
    RegistrationAction,
    UpdateCustomerRegistrationCommand,
)
from .errors import CustomerErrors
from .queries import GetCustomerQuery
from .responses import CustomerResponse


class CreateCustomerHandler:
    """Create a customer unless one with the same uniqueness key exists."""

    def __init__(self, repository: ICustomerRepository):
        self._repository = repository
        self.log = logging.getLogger(self.__class__.__name__)

    async def handle(self, command: CreateCustomerCommand) -> Result[CustomerResponse]:
        self.log.info(
            "Creating customer api_id=%s company=%s", command.api_id, command.company
        )

        try:
            company = Company.parse(command.company)
        except ValueError as e:
            return self._fail(CustomerErrors.validation_failed(str(e)))

        if await self._repository.exists(command.document, command.sinacor_id, company):
            return self._fail(
                CustomerErrors.already_exists(
                    command.document, command.sinacor_id, company.display_name
                )
            )

        try:
            customer = Customer.create(
                api_id=command.api_id,
                document=command.document,
                company=company,
                sinacor_id=command.sinacor_id,
                legacy_external_id=command.legacy_external_id,
            )
            customer = await self._repository.add(customer)
        except DuplicateCustomerError:
            # Another writer won the race between exists() and add()
            return self._fail(
                CustomerErrors.already_exists(
                    command.document, command.sinacor_id, company.display_name
                )
            )
        except DomainValidationError as e:
            return self._fail(CustomerErrors.validation_failed(str(e)))
        except DomainException as e:
            return self._fail(CustomerErrors.domain_error(str(e)))

        self.log.info("Created customer id=%s api_id=%s", customer.id, customer.api_id)
        return Result.success(CustomerResponse.from_entity(customer))

    def _fail(self, error) -> Result[CustomerResponse]:
        self.log.warning("Create customer failed: %s", error)
        return Result.failure(error)


class GetCustomerHandler:
    """Fetch a customer by id, falling back to api_id when no id is given."""

    def __init__(self, repository: ICustomerRepository):
        self._repository = repository
        self.log = logging.getLogger(self.__class__.__name__)

    async def handle(self, query: GetCustomerQuery) -> Result[CustomerResponse]:
        if not query.has_id and not query.has_api_id:
            error = CustomerErrors.invalid_query()
            self.log.warning("Get customer rejected: %s", error)
            return Result.failure(error)

        if query.has_id:
            identifier: object = query.id
            customer = await self._repository.get_by_id(query.id)  # type: ignore[arg-type]
        else:
            identifier = query.api_id.strip()  # type: ignore[union-attr]
            customer = await self._repository.get_by_api_id(identifier)  # type: ignore[arg-type]

        if customer is None:
            error = CustomerErrors.not_found(identifier)
            self.log.warning("Get customer failed: %s", error)
            return Result.failure(error)

        return Result.success(CustomerResponse.from_entity(customer))


class UpdateCustomerRegistrationHandler:
    """Mark a customer as registered or inactive in an external system."""

    def __init__(self, repository: ICustomerRepository):
        self._repository = repository
        self.log = logging.getLogger(self.__class__.__name__)

    async def handle(
        self, command: UpdateCustomerRegistrationCommand
    ) -> Result[CustomerResponse]:
        try:
            system_type = CustomerExternalSystemType.parse(command.system_type)
            action = RegistrationAction(command.action)
        except ValueError as e:
            return self._fail(CustomerErrors.validation_failed(str(e)))

        customer = await self._repository.get_by_id(command.customer_id)
        if customer is None:
            return self._fail(CustomerErrors.not_found(command.customer_id))

        self.log.info(
            "Applying %s in %s for customer id=%s",
            action.value,
            system_type.display_name,
            customer.id,
        )

        try:
            if action is RegistrationAction.REGISTER:
                customer.mark_as_registered_in(system_type)
            else:
                customer.mark_as_inactive_in(system_type)
        except DomainException as e:
            return self._fail(CustomerErrors.domain_error(str(e)))

        await self._repository.update(customer)
        return Result.success(CustomerResponse.from_entity(customer))

    def _fail(self, error) -> Result[CustomerResponse]:
        self.log.warning("Update customer registration failed: %s", error)
        return Result.failure(error)
