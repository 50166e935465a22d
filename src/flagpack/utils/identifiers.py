#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Identifier checks shared by manifest validation and code generation."""

from __future__ import annotations

import keyword
import unicodedata

# "mro" is refused by Enum; "property" would shadow the decorator in the facade body
RESERVED_FEATURE_KEYS = frozenset({"mro", "property"})


def is_python_name(name: str) -> bool:
    """Return True if name can be used verbatim as a Python class or attribute name."""
    return name.isidentifier() and not keyword.iskeyword(name)


def is_feature_key(key: str) -> bool:
    """
    Check whether a manifest key can become an enum member and a facade property.

    Keys are emitted verbatim, never mangled, so anything that would not
    survive as a public Python name is refused. Leading underscores are
    refused because Enum reserves them and the facade keeps its manager there.

    Args:
        key: Manifest key to check

    Returns:
        True if the key is usable as-is
    """
    if not is_python_name(key):
        return False
    # the compiler sees identifiers in NFKC form
    name = unicodedata.normalize("NFKC", key)
    return not name.startswith("_") and name not in RESERVED_FEATURE_KEYS


# 🚩📦🔚
