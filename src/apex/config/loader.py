# SPDX-License-Identifier: Apache-2.0
"""YAML settings loader with version validation."""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, ApexSettings

PathLike = Union[str, Path]


class ConfigVersionError(RuntimeError):
    """Error when configuration version is incompatible."""

    pass


def load_settings(path: PathLike) -> ApexSettings:
    """Load and validate settings from a YAML file.

    Environment variables referenced as ``$VAR`` or ``${VAR}`` are expanded
    before parsing, and kebab-case keys are accepted.

    Args:
        path: Path to YAML configuration file

    Returns:
        ApexSettings instance

    Raises:
        ConfigVersionError: If config_version is missing or too old
        FileNotFoundError: If the YAML file doesn't exist
        ValueError: If the YAML is invalid or holds invalid settings
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        data = yaml.safe_load(os.path.expandvars(yaml_path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("YAML file must contain a dictionary at the root level")

    normalized = _normalize_yaml_keys(data)

    ver = str(normalized.get("config_version", ""))
    if not ver:
        raise ConfigVersionError(
            "config_version missing. Add `config_version: \"1\"` to your YAML."
        )
    try:
        ver_number = int(ver)
    except ValueError as e:
        raise ConfigVersionError(f"config_version must be an integer, got {ver!r}.") from e

    if ver_number < int(MIN_SUPPORTED_VERSION):
        raise ConfigVersionError(
            f"Config version {ver} is too old. "
            f"Minimum supported is {MIN_SUPPORTED_VERSION}. "
            "Please upgrade your configuration."
        )
    if ver_number > int(CURRENT_CONFIG_VERSION):
        warnings.warn(
            f"This binary understands config_version {CURRENT_CONFIG_VERSION}, "
            f"but file is {ver}. Attempting best-effort parse.",
            UserWarning,
            stacklevel=2,
        )
    normalized["config_version"] = ver

    try:
        return ApexSettings(**normalized)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e


def _normalize_yaml_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert kebab-case keys (``log-level``) to snake_case."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}
