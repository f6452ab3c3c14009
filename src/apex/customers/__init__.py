# SPDX-License-Identifier: Apache-2.0
"""Customer bounded context."""
