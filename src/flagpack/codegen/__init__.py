#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Manifest-driven code generation."""

from __future__ import annotations

from flagpack.codegen.generator import FeatureGenerator, GeneratedSource, generate

__all__ = [
    "FeatureGenerator",
    "GeneratedSource",
    "generate",
]

# 🚩📦🔚
