#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for flagpack configuration."""

from __future__ import annotations

# =================================
# Generator configuration defaults
# =================================
DEFAULT_CONFIG_FILE = "flagpack.toml"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_FACADE_NAME = "Features"
PYPROJECT_TOOL_TABLE = "flagpack"  # [tool.flagpack]

# Option names recognized in the generator configuration file
CONFIG_KEY_INPUT_PATH = "inputFilePath"
CONFIG_KEY_OUTPUT_PATH = "outputFilePath"
CONFIG_KEY_OUTPUT_FILENAME = "outputFilename"

# =================================
# Generated source defaults
# =================================
GENERATED_SUFFIX = ".py"
GENERATED_ENUM_NAME = "FeatureVariable"
GENERATED_PROTOCOL_NAME = "FeatureFlagManager"
GENERATED_MANAGER_ATTR = "_feature_flag_manager"
GENERATED_INDENT = "    "

# =================================
# Manifest field names
# =================================
MANIFEST_FIELD_KEY = "key"
MANIFEST_FIELD_DESCRIPTION = "description"
MANIFEST_FIELD_VALUE = "value"
MANIFEST_REQUIRED_FIELDS = (
    MANIFEST_FIELD_KEY,
    MANIFEST_FIELD_DESCRIPTION,
    MANIFEST_FIELD_VALUE,
)

# =================================
# Local override defaults
# =================================
DEFAULT_OVERRIDE_NAMESPACE = "featureFlagsCache"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🚩📦🔚
