#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for flagpack."""

from __future__ import annotations

from enum import Enum

from provide.foundation.errors import FoundationError


class FlagpackError(FoundationError):
    """Base exception for all flagpack errors."""

    pass


class ConfigError(FlagpackError):
    """Raised when the generator configuration is missing, unreadable or invalid."""

    pass


class ManifestErrorKind(str, Enum):
    """Reasons a feature manifest can be rejected."""

    MALFORMED = "malformed"
    MISSING_FIELD = "missing_field"
    UNSUPPORTED_TYPE = "unsupported_type"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_KEY = "invalid_key"
    UNREADABLE = "unreadable"


class ManifestError(FlagpackError):
    """Raised when a feature manifest cannot be read or fails validation."""

    def __init__(
        self,
        message: str,
        kind: ManifestErrorKind,
        *,
        index: int | None = None,
        key: str | None = None,
    ) -> None:
        self.kind = kind
        self.index = index
        self.key = key
        super().__init__(message)


class GenerationError(FlagpackError):
    """Raised when source generation is asked for something it cannot emit."""

    pass


class OutputError(FlagpackError):
    """Raised when generated output cannot be written."""

    pass


class OverrideStoreError(FlagpackError):
    """Raised when the local override medium rejects a write."""

    pass


# 🚩📦🔚
