# SPDX-License-Identifier: Apache-2.0
"""Apex fixed-income customer and bond management core."""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Library code never configures handlers; applications call
# apex.bootstrap.configure_logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
