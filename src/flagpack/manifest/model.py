#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Feature manifest data model.

A manifest is an ordered list of feature entries. Each entry carries a value
of exactly one of four kinds; the kind is a tag fixed at parse time, so no
later code has to guess a value's type.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any
import unicodedata

from attrs import define, field

from flagpack.exceptions import ManifestError, ManifestErrorKind


class ValueKind(str, Enum):
    """The four value kinds a feature can carry.

    Members are declared in probing order: string, bool, int, double.
    """

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def zero_value(self) -> Any:
        """Value returned by typed accessors when nothing resolves."""
        return _ZERO_VALUES[self]

    @property
    def accessor(self) -> str:
        """Name of the capability-contract method serving this kind."""
        return f"get_{self.value}"

    @property
    def annotation(self) -> str:
        """Python annotation used in generated source."""
        return self.python_type.__name__

    @classmethod
    def of(cls, value: Any) -> ValueKind | None:
        """Tag a value with its kind, or None if it is not a supported kind.

        Types are compared exactly, so bool never passes as int and int never
        passes as double.
        """
        for kind in cls:
            if type(value) is kind.python_type:
                return kind
        return None

    @classmethod
    def for_type(cls, value_type: type | ValueKind) -> ValueKind:
        """Map a Python type (or a kind) to its kind.

        Raises:
            TypeError: If the type is not one of str, bool, int, float
        """
        if isinstance(value_type, ValueKind):
            return value_type
        for kind in cls:
            if kind.python_type is value_type:
                return kind
        raise TypeError(f"Unsupported feature value type: {value_type!r}")


_PYTHON_TYPES: dict[ValueKind, type] = {
    ValueKind.STRING: str,
    ValueKind.BOOL: bool,
    ValueKind.INT: int,
    ValueKind.DOUBLE: float,
}

_ZERO_VALUES: dict[ValueKind, Any] = {
    ValueKind.STRING: "",
    ValueKind.BOOL: False,
    ValueKind.INT: 0,
    ValueKind.DOUBLE: 0.0,
}


def _check_value_matches_kind(instance: FeatureEntry, attribute: Any, value: Any) -> None:
    if type(value) is not instance.kind.python_type:
        raise ValueError(
            f"Feature '{instance.key}' declares kind {instance.kind.value} "
            f"but holds {type(value).__name__}"
        )


@define(frozen=True)
class FeatureEntry:
    """A single feature definition with its default value."""

    key: str
    description: str
    kind: ValueKind
    value: Any = field(validator=_check_value_matches_kind)

    @classmethod
    def create(cls, key: str, value: Any, description: str = "") -> FeatureEntry:
        """Build an entry, inferring its kind from the value.

        Raises:
            ManifestError: If the value is not one of the supported kinds
        """
        kind = ValueKind.of(value)
        if kind is None:
            raise ManifestError(
                f"Feature '{key}' has unsupported value type {type(value).__name__}",
                ManifestErrorKind.UNSUPPORTED_TYPE,
                key=key,
            )
        return cls(key=key, description=description, kind=kind, value=value)


@define(frozen=True)
class Manifest:
    """Ordered, immutable collection of feature entries with unique keys."""

    entries: tuple[FeatureEntry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Iterable[FeatureEntry]) -> Manifest:
        """Build a manifest, preserving order and rejecting duplicate keys.

        Keys are compared the way Python compares identifiers (NFKC), so two
        spellings that would name the same generated member are duplicates.

        Raises:
            ManifestError: On a duplicate key
        """
        ordered = tuple(entries)
        seen: set[str] = set()
        for index, entry in enumerate(ordered):
            identifier = unicodedata.normalize("NFKC", entry.key)
            if identifier in seen:
                raise ManifestError(
                    f"Duplicate feature key '{entry.key}' at entry {index}",
                    ManifestErrorKind.DUPLICATE_KEY,
                    index=index,
                    key=entry.key,
                )
            seen.add(identifier)
        return cls(entries=ordered)

    def __iter__(self) -> Iterator[FeatureEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self.entries)

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def get(self, key: str) -> FeatureEntry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def default_for(self, key: str, kind: ValueKind) -> Any | None:
        """Return the first default for key whose value is exactly of kind."""
        for entry in self.entries:
            if entry.key == key and type(entry.value) is kind.python_type:
                return entry.value
        return None


# 🚩📦🔚
