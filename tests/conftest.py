#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for flagpack tests."""

from __future__ import annotations

from collections.abc import Iterator
import json
from pathlib import Path
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from flagpack.manifest import Manifest, parse_manifest

SAMPLE_FEATURES: list[dict[str, Any]] = [
    {"key": "featureA", "description": "Enables the new onboarding flow", "value": False},
    {"key": "featureB", "description": "Promo code shown on the banner", "value": "SALE25"},
    {"key": "maxRetries", "description": "Retry budget for uploads", "value": 3},
    {"key": "sampleRate", "description": "Fraction of sessions traced", "value": 0.25},
]


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    # Reset again after test to ensure clean state
    reset_foundation_setup_for_testing()


@pytest.fixture
def sample_manifest_bytes() -> bytes:
    """Raw JSON for the standard four-feature manifest."""
    return json.dumps(SAMPLE_FEATURES).encode("utf-8")


@pytest.fixture
def sample_manifest(sample_manifest_bytes: bytes) -> Manifest:
    """Parsed standard manifest: one feature of each value kind."""
    return parse_manifest(sample_manifest_bytes)


@pytest.fixture
def manifest_file(tmp_path: Path, sample_manifest_bytes: bytes) -> Path:
    """Standard manifest written to disk."""
    path = tmp_path / "features.json"
    path.write_bytes(sample_manifest_bytes)
    return path


# 🚩📦🔚
