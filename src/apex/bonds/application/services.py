# SPDX-License-Identifier: Apache-2.0
"""Bond application services."""

from __future__ import annotations

import logging

from apex.application.result import Error, Result
from apex.domain.exceptions import DomainException, DomainValidationError

from ..domain.entities import Bond, BondDetail
from ..domain.repositories import DuplicateBondError, IBondDetailRepository, IBondRepository
from .commands import CreateBondCommand, CreateBondDetailCommand, ExtendBondExpirationCommand
from .errors import BondDetailErrors, BondErrors
from .queries import GetBondDetailQuery, GetBondQuery
from .responses import BondDetailResponse, BondResponse


class _Handler:
    """Shared logger and failure reporting for bond handlers."""

    def __init__(self):
        self.log = logging.getLogger(self.__class__.__name__)

    def _fail(self, error: Error) -> Result:
        self.log.warning("%s failed: %s", self.__class__.__name__, error)
        return Result.failure(error)


class CreateBondHandler(_Handler):
    """Create a bond unless its ISIN is already registered."""

    def __init__(self, repository: IBondRepository):
        super().__init__()
        self._repository = repository

    async def handle(self, command: CreateBondCommand) -> Result[BondResponse]:
        self.log.info("Creating bond symbol=%s isin=%s", command.symbol, command.isin)

        isin = (command.isin or "").strip().upper()
        if isin and await self._repository.exists(isin):
            return self._fail(BondErrors.already_exists(isin))

        try:
            bond = Bond.create(
                symbol=command.symbol,
                isin=command.isin,
                issuance_at=command.issuance_at,
                expiration_at=command.expiration_at,
                bond_detail_id=command.bond_detail_id,
                is_cetip_verified=command.is_cetip_verified,
                api_id=command.api_id,
            )
            bond = await self._repository.add(bond)
        except DuplicateBondError:
            return self._fail(BondErrors.already_exists(isin))
        except DomainValidationError as e:
            return self._fail(BondErrors.validation_failed(str(e)))
        except DomainException as e:
            return self._fail(BondErrors.domain_error(str(e)))

        self.log.info("Created bond id=%s isin=%s", bond.id, bond.isin)
        return Result.success(BondResponse.from_entity(bond))


class GetBondHandler(_Handler):
    """Fetch a bond by id, falling back to api_id."""

    def __init__(self, repository: IBondRepository):
        super().__init__()
        self._repository = repository

    async def handle(self, query: GetBondQuery) -> Result[BondResponse]:
        if query.has_id:
            identifier: object = query.id
            bond = await self._repository.get_by_id(query.id)  # type: ignore[arg-type]
        elif query.has_api_id:
            identifier = query.api_id
            bond = await self._repository.get_by_api_id(query.api_id)  # type: ignore[arg-type]
        else:
            return self._fail(BondErrors.invalid_query())

        if bond is None:
            return self._fail(BondErrors.not_found(identifier))
        return Result.success(BondResponse.from_entity(bond))


class ExtendBondExpirationHandler(_Handler):
    """Move a stored bond's expiration date forward."""

    def __init__(self, repository: IBondRepository):
        super().__init__()
        self._repository = repository

    async def handle(self, command: ExtendBondExpirationCommand) -> Result[BondResponse]:
        bond = await self._repository.get_by_id(command.bond_id)
        if bond is None:
            return self._fail(BondErrors.not_found(command.bond_id))

        try:
            bond.extend_expiration(command.new_expiration_at)
        except DomainValidationError as e:
            return self._fail(BondErrors.validation_failed(str(e)))
        except DomainException as e:
            return self._fail(BondErrors.domain_error(str(e)))

        await self._repository.update(bond)
        self.log.info(
            "Extended bond id=%s expiration to %s", bond.id, bond.expiration_at
        )
        return Result.success(BondResponse.from_entity(bond))


class CreateBondDetailHandler(_Handler):
    """Create bond terms."""

    def __init__(self, repository: IBondDetailRepository):
        super().__init__()
        self._repository = repository

    async def handle(self, command: CreateBondDetailCommand) -> Result[BondDetailResponse]:
        self.log.info(
            "Creating bond detail deadline=%s grace=%s",
            command.deadline_calendar_days,
            command.days_to_grace_period,
        )
        try:
            detail = BondDetail.create(
                fantasy_name=command.fantasy_name,
                deadline_calendar_days=command.deadline_calendar_days,
                initial_unit_value=command.initial_unit_value,
                benchmark_percentual_rate=command.benchmark_percentual_rate,
                fixed_percentual_rate=command.fixed_percentual_rate,
                is_available=command.is_available,
                is_exempt_debenture=command.is_exempt_debenture,
                days_to_grace_period=command.days_to_grace_period,
                market_index_id=command.market_index_id,
                bond_base_id=command.bond_base_id,
                bond_emitter_id=command.bond_emitter_id,
            )
        except DomainValidationError as e:
            return self._fail(BondDetailErrors.validation_failed(str(e)))
        except DomainException as e:
            return self._fail(BondDetailErrors.domain_error(str(e)))

        detail = await self._repository.add(detail)
        return Result.success(BondDetailResponse.from_entity(detail))


class GetBondDetailHandler(_Handler):
    """Fetch bond terms by id."""

    def __init__(self, repository: IBondDetailRepository):
        super().__init__()
        self._repository = repository

    async def handle(self, query: GetBondDetailQuery) -> Result[BondDetailResponse]:
        detail = await self._repository.get_by_id(query.id)
        if detail is None:
            return self._fail(BondDetailErrors.not_found(query.id))
        return Result.success(BondDetailResponse.from_entity(detail))
