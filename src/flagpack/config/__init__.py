#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagpack configuration built on the Provide Foundation config stack.

Runtime settings come from the environment; generator settings come from a
TOML or JSON file.
"""

from __future__ import annotations

from flagpack.config.generator import GeneratorConfig, load_generator_config
from flagpack.config.runtime import FlagpackRuntimeConfig

__all__ = [
    "FlagpackRuntimeConfig",
    "GeneratorConfig",
    "load_generator_config",
]

# 🚩📦🔚
