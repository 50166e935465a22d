#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Python source generation for typed feature flag accessors.

The generated module holds, in order: an enumeration of feature keys, the
`FeatureFlagManager` capability protocol, and a facade class exposing one
typed property per feature.
"""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_dir

from flagpack.config.defaults import (
    DEFAULT_FACADE_NAME,
    GENERATED_ENUM_NAME,
    GENERATED_INDENT,
    GENERATED_MANAGER_ATTR,
    GENERATED_PROTOCOL_NAME,
    GENERATED_SUFFIX,
)
from flagpack.exceptions import GenerationError, OutputError
from flagpack.manifest.model import FeatureEntry, Manifest, ValueKind
from flagpack.utils import is_python_name

_RESERVED_TYPE_NAMES = frozenset({GENERATED_ENUM_NAME, GENERATED_PROTOCOL_NAME, "Enum", "Protocol"})


@define(frozen=True)
class GeneratedSource:
    """One generated Python module."""

    filename: str
    content: str

    def write(self, directory: Path) -> Path:
        """Write the module into directory atomically.

        Raises:
            OutputError: If the directory or file cannot be written
        """
        output_file = directory / self.filename
        try:
            ensure_dir(directory)
            atomic_write_text(output_file, self.content)
        except OSError as e:
            raise OutputError(f"Failed to write '{output_file}': {e}") from e
        logger.info("Generated source written", path=str(output_file), size=len(self.content))
        return output_file


class _SourceWriter:
    """Line buffer for the module under construction."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def line(self, text: str = "", depth: int = 0) -> None:
        self._lines.append(f"{GENERATED_INDENT * depth}{text}" if text else "")

    def render(self) -> str:
        return "\n".join(self._lines) + "\n"


class FeatureGenerator:
    """Emits the accessor module for a manifest.

    Generation is a pure function of the manifest and the facade name: the
    same inputs always yield byte-identical output.
    """

    def __init__(self, facade_name: str = DEFAULT_FACADE_NAME) -> None:
        if not is_python_name(facade_name):
            raise GenerationError(f"Facade name {facade_name!r} is not a valid Python identifier")
        if facade_name in _RESERVED_TYPE_NAMES:
            raise GenerationError(f"Facade name {facade_name!r} clashes with a generated type name")
        self.facade_name = facade_name

    def generate(self, manifest: Manifest) -> GeneratedSource:
        logger.debug("Generating feature accessors", facade=self.facade_name, feature_count=len(manifest))
        out = _SourceWriter()

        # Section order is part of the output contract
        self._write_header(out)
        self._write_feature_enum(manifest, out)
        self._write_manager_protocol(out)
        self._write_facade(manifest, out)

        return GeneratedSource(filename=f"{self.facade_name}{GENERATED_SUFFIX}", content=out.render())

    def _write_header(self, out: _SourceWriter) -> None:
        logger.trace("Writing file header")
        out.line(f"# {self.facade_name}{GENERATED_SUFFIX}")
        out.line("#")
        out.line("# -------- DO NOT EDIT THIS FILE --------")
        out.line("# This code is auto-generated by flagpack.")
        out.line("# To make changes:")
        out.line("#   1. Update the feature manifest.")
        out.line("#   2. Run 'flagpack' again.")
        out.line("# ---------------------------------------")
        out.line()
        out.line('"""Typed feature flag accessors."""')
        out.line()
        out.line("from __future__ import annotations")
        out.line()
        out.line("from enum import Enum")
        out.line("from typing import Protocol")
        out.line()
        out.line()

    def _write_feature_enum(self, manifest: Manifest, out: _SourceWriter) -> None:
        logger.trace("Writing feature keys")
        out.line(f"class {GENERATED_ENUM_NAME}(Enum):")
        if not len(manifest):
            out.line("pass", depth=1)
        for entry in manifest:
            out.line(f"{entry.key} = {entry.key!r}", depth=1)
        out.line()
        out.line()

    def _write_manager_protocol(self, out: _SourceWriter) -> None:
        logger.trace("Writing manager protocol")
        out.line(f"class {GENERATED_PROTOCOL_NAME}(Protocol):")
        for index, kind in enumerate(ValueKind):
            if index:
                out.line()
            out.line(f"def {kind.accessor}(self, key: str) -> {kind.annotation}: ...", depth=1)
        out.line()
        out.line()

    def _write_facade(self, manifest: Manifest, out: _SourceWriter) -> None:
        logger.trace("Writing facade", facade=self.facade_name)
        out.line(f"class {self.facade_name}:")
        out.line(f"def __init__(self, feature_flag_manager: {GENERATED_PROTOCOL_NAME}) -> None:", depth=1)
        out.line(f"self.{GENERATED_MANAGER_ATTR} = feature_flag_manager", depth=2)
        for entry in manifest:
            self._write_feature(entry, out)

    def _write_feature(self, entry: FeatureEntry, out: _SourceWriter) -> None:
        logger.trace("Writing feature", key=entry.key, kind=entry.kind.value)
        out.line()
        out.line("@property", depth=1)
        out.line(f"def {entry.key}(self) -> {entry.kind.annotation}:", depth=1)
        if entry.description:
            out.line(_docstring(entry.description), depth=2)
        out.line(
            f"return self.{GENERATED_MANAGER_ATTR}.{entry.kind.accessor}({GENERATED_ENUM_NAME}.{entry.key}.value)",
            depth=2,
        )


def _docstring(text: str) -> str:
    """Render text as a docstring literal that cannot break out of its quotes."""
    if not text.isprintable() or "\\" in text or '"' in text:
        return repr(text)
    return f'"""{text}"""'


def generate(manifest: Manifest, facade_name: str = DEFAULT_FACADE_NAME) -> GeneratedSource:
    """Generate the accessor module for manifest.

    Args:
        manifest: Parsed feature manifest
        facade_name: Name of the facade class, also the module's base name

    Returns:
        GeneratedSource ready to be written
    """
    return FeatureGenerator(facade_name).generate(manifest)


# 🚩📦🔚
