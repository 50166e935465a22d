#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-process override store."""

from __future__ import annotations

from collections.abc import Mapping
import threading
from typing import Any


class InMemoryOverrideStore:
    """Dict-backed override store, lost when the process exits."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._data.get(key)

    def get_all(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._data)

    def set_all(self, overrides: Mapping[str, Any]) -> None:
        # Swap in a fresh dict so readers holding the old one stay consistent
        snapshot = dict(overrides)
        with self._lock:
            self._data = snapshot

    def clear(self) -> None:
        with self._lock:
            self._data = {}


# 🚩📦🔚
