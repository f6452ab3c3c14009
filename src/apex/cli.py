# SPDX-License-Identifier: Apache-2.0
"""Apex command line interface."""

from __future__ import annotations

import asyncio
from decimal import Decimal
from pathlib import Path
from typing import Optional

import typer

from apex.application.result import Result, status_code_for
from apex.domain.exceptions import DomainValidationError
from apex.domain.value_objects import BusinessDocument, Isin

app = typer.Typer(
    add_completion=False,
    help="Apex fixed-income customer and bond tools",
)

# Exit codes by boundary status; anything else exits 1
_EXIT_CODES = {404: 2, 409: 3}


def _exit_for(result: Result) -> None:
    """Print a failed result and exit with its mapped code."""
    typer.echo(f"{result.error.code}: {result.error.message}", err=True)
    raise typer.Exit(_EXIT_CODES.get(status_code_for(result.error), 1))


def _load_settings(config: Optional[Path]):
    from apex.config import ApexSettings, load_settings

    return load_settings(config) if config else ApexSettings()


@app.command()
def document(value: str = typer.Argument(..., help="CPF or CNPJ, masked or digits only")):
    """Classify a CPF/CNPJ and print it with its mask."""
    try:
        doc = BusinessDocument.create(value)
    except DomainValidationError as e:
        typer.echo(f"Invalid document: {e}", err=True)
        raise typer.Exit(1) from e
    typer.echo(f"{doc.type.value.upper()} {doc.format_with_mask()}")


@app.command()
def isin(value: str = typer.Argument(..., help="ISIN code")):
    """Validate an ISIN and print its normalized form."""
    try:
        code = Isin.create(value)
    except DomainValidationError as e:
        typer.echo(f"Invalid ISIN: {e}", err=True)
        raise typer.Exit(1) from e
    typer.echo(code.value)


@app.command("create-customer")
def create_customer(
    api_id: str = typer.Option(..., "--api-id", help="External API identifier"),
    document: str = typer.Option(..., "--document", help="CPF or CNPJ"),
    company: str = typer.Option(..., "--company", help="Warren or Rena"),
    sinacor_id: Optional[str] = typer.Option(None, "--sinacor-id"),
    legacy_external_id: Optional[str] = typer.Option(None, "--legacy-external-id"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
):
    """Create a customer and print it as JSON."""
    from apex.bootstrap import bootstrap
    from apex.customers.application.commands import CreateCustomerCommand

    container = bootstrap(_load_settings(config))
    command = CreateCustomerCommand(
        api_id=api_id,
        document=document,
        company=company,
        sinacor_id=sinacor_id,
        legacy_external_id=legacy_external_id,
    )
    result = asyncio.run(container.create_customer.handle(command))
    if result.is_failure:
        _exit_for(result)
    typer.echo(result.value.model_dump_json(indent=2))


@app.command("describe-bond-detail")
def describe_bond_detail(
    deadline: int = typer.Option(..., "--deadline", help="Deadline in calendar days"),
    grace: int = typer.Option(0, "--grace", help="Days to grace period"),
    benchmark: float = typer.Option(0.0, "--benchmark", help="Benchmark rate (%)"),
    fixed: float = typer.Option(0.0, "--fixed", help="Fixed rate (%)"),
):
    """Print classification and display labels for a set of bond terms."""
    from apex.bonds.domain.entities import BondDetail

    try:
        detail = BondDetail.create(
            fantasy_name=None,
            deadline_calendar_days=deadline,
            initial_unit_value=Decimal("1000"),
            benchmark_percentual_rate=benchmark,
            fixed_percentual_rate=fixed,
            is_available=True,
            is_exempt_debenture=False,
            days_to_grace_period=grace,
            market_index_id=1,
            bond_base_id=1,
            bond_emitter_id=1,
        )
    except DomainValidationError as e:
        typer.echo(f"BondDetail.ValidationFailed: {e}", err=True)
        raise typer.Exit(1) from e

    if detail.is_hybrid:
        kind = "hybrid"
    elif detail.is_post_fixed:
        kind = "post-fixed"
    elif detail.is_pre_fixed:
        kind = "pre-fixed"
    else:
        kind = "unclassified"

    typer.echo(f"Type: {kind}")
    typer.echo(f"Deadline: {detail.get_deadline_description()}")
    typer.echo(f"Liquidity: {detail.get_liquidity_description()}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
