#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Feature manifest model and parser."""

from __future__ import annotations

from flagpack.manifest.model import FeatureEntry, Manifest, ValueKind
from flagpack.manifest.parser import load_manifest, parse_manifest

__all__ = [
    "FeatureEntry",
    "Manifest",
    "ValueKind",
    "load_manifest",
    "parse_manifest",
]

# 🚩📦🔚
