#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Small helpers shared across flagpack."""

from __future__ import annotations

from flagpack.utils.identifiers import is_feature_key, is_python_name

__all__ = [
    "is_feature_key",
    "is_python_name",
]

# 🚩📦🔚
