#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Override store interface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OverrideStore(Protocol):
    """Boundary to whatever key-value medium holds local overrides.

    Implementations are synchronous and must serialize `set_all` and `clear`
    against reads, so a reader never sees a half-written mapping. Reads from
    an unreachable medium report absence instead of raising.
    """

    def get(self, key: str) -> Any | None: ...

    def get_all(self) -> dict[str, Any]: ...

    def set_all(self, overrides: Mapping[str, Any]) -> None: ...

    def clear(self) -> None: ...


# 🚩📦🔚
