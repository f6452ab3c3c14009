# SPDX-License-Identifier: Apache-2.0
"""Configuration management for Apex."""

from .loader import ConfigVersionError, load_settings
from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, ApexSettings

__all__ = [
    "ApexSettings",
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "load_settings",
    "ConfigVersionError",
]
