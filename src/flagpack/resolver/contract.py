#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Capability contract between generated facades and resolver backends."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FeatureFlagManager(Protocol):
    """The four typed accessors a facade needs from its backend.

    Mirrors the protocol emitted into every generated module. Accessors
    never raise; a feature that cannot be resolved yields the kind's zero value.
    """

    def get_string(self, key: str) -> str: ...

    def get_bool(self, key: str) -> bool: ...

    def get_int(self, key: str) -> int: ...

    def get_double(self, key: str) -> float: ...


@runtime_checkable
class RemoteConfigSource(Protocol):
    """A remote dynamic-config backend that can hand out its latest values."""

    def snapshot(self) -> Mapping[str, Any]: ...


# 🚩📦🔚
