# SPDX-License-Identifier: Apache-2.0
"""Cross-context application primitives."""

from __future__ import annotations

from .result import Error, Result, ResultStateError, status_code_for

__all__ = ["Error", "Result", "ResultStateError", "status_code_for"]
