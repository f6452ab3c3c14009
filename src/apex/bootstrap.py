# SPDX-License-Identifier: Apache-2.0
"""Composition root for Apex.

Handlers are wired explicitly to their repositories here. Bootstrap is
invoked lazily by CLI commands so importing the CLI for help text or tests
has no side effects.
"""

from __future__ import annotations

__all__ = [
    "ApexContainer",
    "bootstrap",
    "build_container",
    "configure_logging",
    "is_bootstrapped",
    "reset_bootstrap_state",
]

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from apex.bonds.application.services import (
    CreateBondDetailHandler,
    CreateBondHandler,
    ExtendBondExpirationHandler,
    GetBondDetailHandler,
    GetBondHandler,
)
from apex.bonds.domain.repositories import IBondDetailRepository, IBondRepository
from apex.bonds.infrastructure.repositories import (
    InMemoryBondDetailRepository,
    InMemoryBondRepository,
)
from apex.config.settings import ApexSettings
from apex.customers.application.services import (
    CreateCustomerHandler,
    GetCustomerHandler,
    UpdateCustomerRegistrationHandler,
)
from apex.customers.domain.repositories import ICustomerRepository
from apex.customers.infrastructure.repositories import InMemoryCustomerRepository

# Global state so bootstrap only runs once per process
_CONTAINER: Optional["ApexContainer"] = None
_LOGGING_CONFIGURED = False
_BOOTSTRAP_LOCK = threading.Lock()

logger = logging.getLogger(__name__)


@dataclass
class ApexContainer:
    """Repositories and the handlers wired to them."""

    settings: ApexSettings
    customer_repository: ICustomerRepository
    bond_repository: IBondRepository
    bond_detail_repository: IBondDetailRepository
    create_customer: CreateCustomerHandler = field(init=False)
    get_customer: GetCustomerHandler = field(init=False)
    update_customer_registration: UpdateCustomerRegistrationHandler = field(init=False)
    create_bond: CreateBondHandler = field(init=False)
    get_bond: GetBondHandler = field(init=False)
    extend_bond_expiration: ExtendBondExpirationHandler = field(init=False)
    create_bond_detail: CreateBondDetailHandler = field(init=False)
    get_bond_detail: GetBondDetailHandler = field(init=False)

    def __post_init__(self):
        self.create_customer = CreateCustomerHandler(self.customer_repository)
        self.get_customer = GetCustomerHandler(self.customer_repository)
        self.update_customer_registration = UpdateCustomerRegistrationHandler(
            self.customer_repository
        )
        self.create_bond = CreateBondHandler(self.bond_repository)
        self.get_bond = GetBondHandler(self.bond_repository)
        self.extend_bond_expiration = ExtendBondExpirationHandler(self.bond_repository)
        self.create_bond_detail = CreateBondDetailHandler(self.bond_detail_repository)
        self.get_bond_detail = GetBondDetailHandler(self.bond_detail_repository)


def configure_logging(settings: ApexSettings) -> None:
    """Configure root logging from settings, once per process."""
    global _LOGGING_CONFIGURED
    with _BOOTSTRAP_LOCK:
        if _LOGGING_CONFIGURED:
            return
        logging.basicConfig(level=settings.log_level, format=settings.log_format)
        _LOGGING_CONFIGURED = True
    logger.debug("Logging configured at %s", settings.log_level)


def build_container(
    settings: Optional[ApexSettings] = None,
    customer_repository: Optional[ICustomerRepository] = None,
    bond_repository: Optional[IBondRepository] = None,
    bond_detail_repository: Optional[IBondDetailRepository] = None,
) -> ApexContainer:
    """Wire handlers to the given repositories, defaulting to in-memory ones."""
    return ApexContainer(
        settings=settings or ApexSettings(),
        customer_repository=customer_repository or InMemoryCustomerRepository(),
        bond_repository=bond_repository or InMemoryBondRepository(),
        bond_detail_repository=bond_detail_repository or InMemoryBondDetailRepository(),
    )


def bootstrap(settings: Optional[ApexSettings] = None) -> ApexContainer:
    """Initialize Apex and return the process-wide container.

    Idempotent: later calls return the container built by the first one.
    """
    global _CONTAINER
    settings = settings or ApexSettings()
    configure_logging(settings)

    with _BOOTSTRAP_LOCK:
        if _CONTAINER is not None:
            logger.debug("Bootstrap already completed, skipping")
            return _CONTAINER
        logger.info("Starting Apex bootstrap (environment=%s)", settings.environment)
        _CONTAINER = build_container(settings)
        return _CONTAINER


def is_bootstrapped() -> bool:
    return _CONTAINER is not None


def reset_bootstrap_state() -> None:
    """Reset bootstrap state for testing purposes."""
    global _CONTAINER, _LOGGING_CONFIGURED
    with _BOOTSTRAP_LOCK:
        _CONTAINER = None
        _LOGGING_CONFIGURED = False
    logger.debug("Bootstrap state reset for testing")
