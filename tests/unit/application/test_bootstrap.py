# SPDX-License-Identifier: Apache-2.0
"""Tests for the composition root."""

from __future__ import annotations

import pytest

from apex.bootstrap import bootstrap, build_container, is_bootstrapped, reset_bootstrap_state
from apex.config import ApexSettings
from apex.customers.application.commands import CreateCustomerCommand
from apex.customers.application.queries import GetCustomerQuery
from tests.fakes.repositories import FakeCustomerRepository


@pytest.fixture(autouse=True)
def fresh_bootstrap():
    reset_bootstrap_state()
    yield
    reset_bootstrap_state()


def test_bootstrap_is_idempotent():
    assert not is_bootstrapped()

    first = bootstrap(ApexSettings(environment="test"))
    second = bootstrap()

    assert is_bootstrapped()
    assert first is second


@pytest.mark.asyncio
async def test_handlers_share_repositories():
    repository = FakeCustomerRepository()
    container = build_container(customer_repository=repository)

    created = await container.create_customer.handle(
        CreateCustomerCommand(api_id="c1", document="12345678901", company="Warren")
    )
    fetched = await container.get_customer.handle(GetCustomerQuery(api_id="c1"))

    assert created.is_success
    assert fetched.value.id == created.value.id
    assert len(repository.add_calls) == 1
