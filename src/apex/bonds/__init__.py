# SPDX-License-Identifier: Apache-2.0
"""Bond bounded context."""
