#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagpack core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from flagpack.api import generate_from_config, generate_from_config_file
from flagpack.codegen import FeatureGenerator, GeneratedSource, generate
from flagpack.config import GeneratorConfig, load_generator_config
from flagpack.exceptions import (
    ConfigError,
    FlagpackError,
    GenerationError,
    ManifestError,
    ManifestErrorKind,
    OutputError,
    OverrideStoreError,
)
from flagpack.manifest import FeatureEntry, Manifest, ValueKind, load_manifest, parse_manifest
from flagpack.overrides import InMemoryOverrideStore, JsonFileOverrideStore, OverrideStore
from flagpack.resolver import (
    FeatureFlagManager,
    FeatureFlagResolver,
    RemoteConfigSource,
    Resolution,
    ResolutionTier,
)

__version__ = get_version("flagpack", caller_file=__file__)

__all__ = [
    "ConfigError",
    "FeatureEntry",
    "FeatureFlagManager",
    "FeatureFlagResolver",
    "FeatureGenerator",
    "FlagpackError",
    "GeneratedSource",
    "GenerationError",
    "GeneratorConfig",
    "InMemoryOverrideStore",
    "JsonFileOverrideStore",
    "Manifest",
    "ManifestError",
    "ManifestErrorKind",
    "OutputError",
    "OverrideStore",
    "OverrideStoreError",
    "RemoteConfigSource",
    "Resolution",
    "ResolutionTier",
    "ValueKind",
    "__version__",
    "generate",
    "generate_from_config",
    "generate_from_config_file",
    "load_generator_config",
    "load_manifest",
    "parse_manifest",
]

# 🚩📦🔚
