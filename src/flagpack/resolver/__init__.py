#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Layered feature value resolution."""

from __future__ import annotations

from flagpack.resolver.contract import FeatureFlagManager, RemoteConfigSource
from flagpack.resolver.resolver import FeatureFlagResolver, Resolution, ResolutionTier

__all__ = [
    "FeatureFlagManager",
    "FeatureFlagResolver",
    "RemoteConfigSource",
    "Resolution",
    "ResolutionTier",
]

# 🚩📦🔚
