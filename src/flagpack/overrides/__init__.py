#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Local override store adapters."""

from __future__ import annotations

from flagpack.overrides.base import OverrideStore
from flagpack.overrides.json_file import JsonFileOverrideStore
from flagpack.overrides.memory import InMemoryOverrideStore

__all__ = [
    "InMemoryOverrideStore",
    "JsonFileOverrideStore",
    "OverrideStore",
]

# 🚩📦🔚
