# SPDX-License-Identifier: Apache-2.0
"""Unit tests for customer command and query handlers."""

from __future__ import annotations

import asyncio

import pytest

from apex.application.result import status_code_for
from apex.customers.application.commands import (
    CreateCustomerCommand,
    RegistrationAction,
    UpdateCustomerRegistrationCommand,
)
from apex.customers.application.queries import GetCustomerQuery
from apex.customers.application.services import (
    CreateCustomerHandler,
    GetCustomerHandler,
    UpdateCustomerRegistrationHandler,
)
from apex.customers.domain.entities import (
    Company,
    CustomerExternalSystemType,
)


def _command(**overrides) -> CreateCustomerCommand:
    kwargs = {
        "api_id": "cust-001",
        "document": "123.456.789-01",
        "company": Company.WARREN,
        "sinacor_id": "123456",
    }
    kwargs.update(overrides)
    return CreateCustomerCommand(**kwargs)


class TestCreateCustomerHandler:
    """Tests for CreateCustomerHandler."""

    @pytest.mark.asyncio
    async def test_creates_customer(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)

        result = await handler.handle(_command())

        assert result.is_success
        response = result.value
        assert response.id == 1
        assert response.api_id == "cust-001"
        assert response.document == "12345678901"
        assert response.company == "Warren"
        assert response.sinacor_id == "123456"
        assert [r.system_type for r in response.external_registers] == ["Cetip", "Selic"]
        assert all(r.status == "NotRegistered" for r in response.external_registers)
        assert all(r.id > 0 for r in response.external_registers)
        assert len(customer_repository) == 1

    @pytest.mark.asyncio
    async def test_company_by_name(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)

        result = await handler.handle(_command(company="Rena"))

        assert result.value.company == "Rena"

    @pytest.mark.asyncio
    async def test_duplicate_returns_already_exists_without_adding(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)
        await handler.handle(_command())

        result = await handler.handle(_command(api_id="other"))

        assert result.is_failure
        assert result.error.code == "Customer.AlreadyExists"
        assert result.error.message == (
            "Customer with document '123.456.789-01', Sinacor ID '123456' "
            "and company 'Warren' already exists."
        )
        assert status_code_for(result.error) == 409
        assert len(customer_repository.add_calls) == 1

    @pytest.mark.asyncio
    async def test_same_document_other_company_is_allowed(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)
        await handler.handle(_command())

        result = await handler.handle(_command(company=Company.RENA))

        assert result.is_success

    @pytest.mark.asyncio
    async def test_late_duplicate_is_already_exists(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)
        await handler.handle(_command())
        customer_repository.stale_exists = True

        result = await handler.handle(_command(api_id="racer"))

        assert result.error.code == "Customer.AlreadyExists"
        assert len(customer_repository) == 1

    @pytest.mark.asyncio
    async def test_validation_failure(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)

        result = await handler.handle(_command(document="123"))

        assert result.is_failure
        assert result.error.code == "Customer.ValidationFailed"
        assert "11 (CPF) or 14 (CNPJ)" in result.error.message
        assert status_code_for(result.error) == 400
        assert customer_repository.add_calls == []

    @pytest.mark.asyncio
    async def test_unknown_company_is_validation_failure(self, customer_repository):
        handler = CreateCustomerHandler(customer_repository)

        result = await handler.handle(_command(company="Acme"))

        assert result.error.code == "Customer.ValidationFailed"
        assert customer_repository.exists_calls == []

    @pytest.mark.asyncio
    async def test_cancellation_propagates_and_persists_nothing(self, customer_repository):
        customer_repository.block_on_exists = True
        handler = CreateCustomerHandler(customer_repository)

        task = asyncio.create_task(handler.handle(_command()))
        await customer_repository.exists_entered.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert customer_repository.add_calls == []
        assert len(customer_repository) == 0


class TestGetCustomerHandler:
    """Tests for GetCustomerHandler."""

    @pytest.mark.asyncio
    async def test_requires_an_identifier(self, customer_repository):
        handler = GetCustomerHandler(customer_repository)

        for query in (GetCustomerQuery(), GetCustomerQuery(api_id="   ")):
            result = await handler.handle(query)
            assert result.error.code == "Customer.InvalidQuery"
            assert result.error.message == "Either Id or ApiId must be provided."

    @pytest.mark.asyncio
    async def test_get_by_id(self, customer_repository, make_customer):
        stored = await customer_repository.add(make_customer())
        handler = GetCustomerHandler(customer_repository)

        result = await handler.handle(GetCustomerQuery(id=stored.id))

        assert result.value.api_id == "cust-001"

    @pytest.mark.asyncio
    async def test_get_by_api_id(self, customer_repository, make_customer):
        await customer_repository.add(make_customer())
        handler = GetCustomerHandler(customer_repository)

        result = await handler.handle(GetCustomerQuery(api_id="cust-001"))

        assert result.value.id == 1

    @pytest.mark.asyncio
    async def test_id_wins_over_api_id(self, customer_repository, make_customer):
        await customer_repository.add(make_customer())
        handler = GetCustomerHandler(customer_repository)

        result = await handler.handle(GetCustomerQuery(id=99, api_id="cust-001"))

        assert result.error.code == "Customer.NotFound"
        assert result.error.message == "Customer not found with identifier: 99"
        assert customer_repository.get_by_api_id_calls == []

    @pytest.mark.asyncio
    async def test_zero_id_is_still_an_id(self, customer_repository, make_customer):
        stored = await customer_repository.add(make_customer())
        handler = GetCustomerHandler(customer_repository)

        with_api_id = await handler.handle(GetCustomerQuery(id=0, api_id=stored.api_id))
        alone = await handler.handle(GetCustomerQuery(id=0))

        assert with_api_id.error.code == "Customer.NotFound"
        assert customer_repository.get_by_api_id_calls == []
        assert alone.error.code == "Customer.NotFound"
        assert alone.error.message == "Customer not found with identifier: 0"

    @pytest.mark.asyncio
    async def test_not_found_by_api_id(self, customer_repository):
        handler = GetCustomerHandler(customer_repository)

        result = await handler.handle(GetCustomerQuery(api_id="missing"))

        assert result.error.message == "Customer not found with identifier: missing"
        assert status_code_for(result.error) == 404


class TestUpdateCustomerRegistrationHandler:
    """Tests for UpdateCustomerRegistrationHandler."""

    @pytest.mark.asyncio
    async def test_register_and_persist(self, customer_repository, make_customer):
        stored = await customer_repository.add(make_customer())
        handler = UpdateCustomerRegistrationHandler(customer_repository)

        result = await handler.handle(
            UpdateCustomerRegistrationCommand(stored.id, CustomerExternalSystemType.CETIP)
        )

        assert result.is_success
        reloaded = await customer_repository.get_by_id(stored.id)
        assert reloaded.is_registered_in_cetip
        assert reloaded.last_updated_at is not None

    @pytest.mark.asyncio
    async def test_inactivate_by_name(self, customer_repository, make_customer):
        stored = await customer_repository.add(make_customer())
        handler = UpdateCustomerRegistrationHandler(customer_repository)

        result = await handler.handle(
            UpdateCustomerRegistrationCommand(stored.id, "Selic", RegistrationAction.INACTIVATE)
        )

        statuses = {r.system_type: r.status for r in result.value.external_registers}
        assert statuses == {"Cetip": "NotRegistered", "Selic": "Inactive"}

    @pytest.mark.asyncio
    async def test_unknown_customer(self, customer_repository):
        handler = UpdateCustomerRegistrationHandler(customer_repository)

        result = await handler.handle(UpdateCustomerRegistrationCommand(5, "Cetip"))

        assert result.error.code == "Customer.NotFound"

    @pytest.mark.asyncio
    async def test_unknown_system_type_or_action(self, customer_repository, make_customer):
        stored = await customer_repository.add(make_customer())
        handler = UpdateCustomerRegistrationHandler(customer_repository)

        bad_type = await handler.handle(UpdateCustomerRegistrationCommand(stored.id, "B3"))
        bad_action = await handler.handle(
            UpdateCustomerRegistrationCommand(stored.id, "Cetip", "delete")
        )

        assert bad_type.error.code == "Customer.ValidationFailed"
        assert bad_action.error.code == "Customer.ValidationFailed"
        assert customer_repository.update_calls == []
