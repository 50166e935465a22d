#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Feature manifest parsing and validation."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from provide.foundation import logger

from flagpack.config.defaults import (
    MANIFEST_FIELD_DESCRIPTION,
    MANIFEST_FIELD_KEY,
    MANIFEST_FIELD_VALUE,
    MANIFEST_REQUIRED_FIELDS,
)
from flagpack.exceptions import ManifestError, ManifestErrorKind
from flagpack.manifest.model import FeatureEntry, Manifest, ValueKind
from flagpack.utils import is_feature_key


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not allowed")


def parse_manifest(raw: bytes | str) -> Manifest:
    """Parse and validate a JSON feature manifest.

    The document must be an array of objects, each with `key`, `description`
    and `value`. Values are tagged by their JSON type: a number literal with a
    fraction or exponent (`0.0`, `1e3`) is a double, one without (`0`) is an
    int. NaN, Infinity and literals that overflow to infinity are rejected.

    Args:
        raw: Manifest document as bytes or text

    Returns:
        Manifest with entries in document order

    Raises:
        ManifestError: With kind MALFORMED, MISSING_FIELD, UNSUPPORTED_TYPE,
            INVALID_KEY or DUPLICATE_KEY
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ManifestError(f"Manifest is not valid JSON: {e}", ManifestErrorKind.MALFORMED) from e
    except RecursionError as e:
        raise ManifestError("Manifest is nested too deeply", ManifestErrorKind.MALFORMED) from e

    if not isinstance(document, list):
        raise ManifestError(
            f"Manifest must be a JSON array, got {type(document).__name__}",
            ManifestErrorKind.MALFORMED,
        )

    entries = [_parse_entry(index, item) for index, item in enumerate(document)]
    manifest = Manifest.from_entries(entries)
    logger.debug("Parsed feature manifest", feature_count=len(manifest))
    return manifest


def load_manifest(path: Path) -> Manifest:
    """Read and parse a manifest file.

    Raises:
        ManifestError: With kind UNREADABLE if the file cannot be read, or any
            parse error from parse_manifest
    """
    logger.debug("Loading feature manifest", path=str(path))
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ManifestError(
            f"Unable to read manifest '{path}': {e}",
            ManifestErrorKind.UNREADABLE,
        ) from e
    return parse_manifest(raw)


def _parse_entry(index: int, item: Any) -> FeatureEntry:
    if not isinstance(item, dict):
        raise ManifestError(
            f"Manifest entry {index} must be an object, got {type(item).__name__}",
            ManifestErrorKind.MALFORMED,
            index=index,
        )

    missing = [name for name in MANIFEST_REQUIRED_FIELDS if name not in item]
    if missing:
        raise ManifestError(
            f"Manifest entry {index} is missing required field(s): {', '.join(missing)}",
            ManifestErrorKind.MISSING_FIELD,
            index=index,
            key=item.get(MANIFEST_FIELD_KEY) if isinstance(item.get(MANIFEST_FIELD_KEY), str) else None,
        )

    key = item[MANIFEST_FIELD_KEY]
    description = item[MANIFEST_FIELD_DESCRIPTION]
    value = item[MANIFEST_FIELD_VALUE]

    if not isinstance(key, str):
        raise ManifestError(
            f"Manifest entry {index}: '{MANIFEST_FIELD_KEY}' must be a string",
            ManifestErrorKind.MALFORMED,
            index=index,
        )
    if not isinstance(description, str):
        raise ManifestError(
            f"Manifest entry {index}: '{MANIFEST_FIELD_DESCRIPTION}' must be a string",
            ManifestErrorKind.MALFORMED,
            index=index,
            key=key,
        )
    if not is_feature_key(key):
        raise ManifestError(
            f"Manifest entry {index}: key {key!r} is not a valid public Python identifier",
            ManifestErrorKind.INVALID_KEY,
            index=index,
            key=key,
        )

    kind = ValueKind.of(value)
    if kind is None:
        raise ManifestError(
            f"Feature '{key}' has unsupported value type {_json_type_name(value)}",
            ManifestErrorKind.UNSUPPORTED_TYPE,
            index=index,
            key=key,
        )

    if kind is ValueKind.DOUBLE and not math.isfinite(value):
        raise ManifestError(
            f"Feature '{key}' has non-finite value {value!r}",
            ManifestErrorKind.MALFORMED,
            index=index,
            key=key,
        )

    return FeatureEntry(key=key, description=description, kind=kind, value=value)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


# 🚩📦🔚
