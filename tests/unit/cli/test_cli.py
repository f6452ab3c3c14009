# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the apex CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from apex.bootstrap import reset_bootstrap_state
from apex.cli import app


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def fresh_bootstrap():
    """Each test starts with an empty composition root."""
    reset_bootstrap_state()
    yield
    reset_bootstrap_state()


def test_document_command_cpf(runner):
    result = runner.invoke(app, ["document", "12345678901"])

    assert result.exit_code == 0
    assert "CPF 123.456.789-01" in result.output


def test_document_command_cnpj(runner):
    result = runner.invoke(app, ["document", "12.345.678/0001-95"])

    assert result.exit_code == 0
    assert "CNPJ 12.345.678/0001-95" in result.output


def test_document_command_invalid(runner):
    result = runner.invoke(app, ["document", "123"])

    assert result.exit_code == 1
    assert "Invalid document" in result.output


def test_isin_command(runner):
    ok = runner.invoke(app, ["isin", " brpetrdbs036 "])
    bad = runner.invoke(app, ["isin", "12PETRDBS036"])

    assert ok.exit_code == 0
    assert "BRPETRDBS036" in ok.output
    assert bad.exit_code == 1
    assert "ISIN format is invalid" in bad.output


def test_create_customer_prints_json(runner):
    result = runner.invoke(
        app,
        [
            "create-customer",
            "--api-id", "cli-1",
            "--document", "123.456.789-01",
            "--company", "Warren",
            "--sinacor-id", "42",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["id"] == 1
    assert payload["document"] == "12345678901"
    assert payload["company"] == "Warren"
    assert len(payload["external_registers"]) == 2


def test_create_customer_duplicate_exit_code(runner):
    args = [
        "create-customer",
        "--api-id", "cli-1",
        "--document", "12345678901",
        "--company", "Rena",
    ]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)

    assert first.exit_code == 0
    assert second.exit_code == 3
    assert "Customer.AlreadyExists" in second.output


def test_create_customer_validation_exit_code(runner):
    result = runner.invoke(
        app,
        ["create-customer", "--api-id", "x", "--document", "1", "--company", "Warren"],
    )

    assert result.exit_code == 1
    assert "Customer.ValidationFailed" in result.output


def test_create_customer_with_config(runner, tmp_path):
    config = tmp_path / "apex.yaml"
    config.write_text('config_version: "1"\nenvironment: test\nlog_level: ERROR\n')

    result = runner.invoke(
        app,
        [
            "create-customer",
            "--api-id", "cfg",
            "--document", "12345678901",
            "--company", "1",
            "--config", str(config),
        ],
    )

    assert result.exit_code == 0


@pytest.mark.parametrize(
    "args,expected",
    [
        (["--deadline", "720", "--grace", "0", "--benchmark", "110"], ["post-fixed", "2 anos", "Diária"]),
        (["--deadline", "180", "--grace", "180", "--fixed", "12"], ["pre-fixed", "180 dias", "No Vencimento"]),
        (["--deadline", "900", "--grace", "30", "--fixed", "5", "--benchmark", "100"], ["hybrid", "2.5 anos", "30 dias"]),
    ],
)
def test_describe_bond_detail(runner, args, expected):
    result = runner.invoke(app, ["describe-bond-detail", *args])

    assert result.exit_code == 0
    for text in expected:
        assert text in result.output


def test_describe_bond_detail_invalid(runner):
    result = runner.invoke(app, ["describe-bond-detail", "--deadline", "10", "--grace", "11"])

    assert result.exit_code == 1
    assert "Grace period cannot exceed deadline." in result.output
