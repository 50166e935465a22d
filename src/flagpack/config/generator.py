#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Generator configuration: where the manifest lives and where code is written."""

from __future__ import annotations

import json
from pathlib import Path
import tomllib
from typing import Any

from attrs import define, field
from provide.foundation import logger

from flagpack.config.defaults import (
    CONFIG_KEY_INPUT_PATH,
    CONFIG_KEY_OUTPUT_FILENAME,
    CONFIG_KEY_OUTPUT_PATH,
    DEFAULT_OUTPUT_DIR,
    GENERATED_SUFFIX,
    PYPROJECT_TOOL_TABLE,
)
from flagpack.exceptions import ConfigError
from flagpack.utils import is_python_name


def _validate_output_filename(instance: GeneratorConfig, attribute: Any, value: str) -> None:
    if not is_python_name(value):
        raise ConfigError(
            f"'{CONFIG_KEY_OUTPUT_FILENAME}' must be a valid Python identifier, got {value!r}"
        )


@define(frozen=True)
class GeneratorConfig:
    """Options recognized by the generator.

    `output_filename` is both the generated module's base name and the name of
    the facade class inside it.
    """

    input_file_path: Path = field(converter=Path)
    output_filename: str = field(validator=_validate_output_filename)
    output_file_path: Path = field(default=Path(DEFAULT_OUTPUT_DIR), converter=Path)

    @property
    def output_file(self) -> Path:
        """Full path of the generated module."""
        return self.output_file_path / f"{self.output_filename}{GENERATED_SUFFIX}"

    @classmethod
    def from_mapping(cls, data: dict[str, Any], base_dir: Path | None = None) -> GeneratorConfig:
        """Build a config from raw option names, resolving relative paths against base_dir."""
        input_path = _required_str(data, CONFIG_KEY_INPUT_PATH)
        filename = _required_str(data, CONFIG_KEY_OUTPUT_FILENAME)
        output_path = data.get(CONFIG_KEY_OUTPUT_PATH, DEFAULT_OUTPUT_DIR)
        if not isinstance(output_path, str):
            raise ConfigError(f"'{CONFIG_KEY_OUTPUT_PATH}' must be a string")

        if filename.endswith(GENERATED_SUFFIX):
            filename = filename[: -len(GENERATED_SUFFIX)]

        return cls(
            input_file_path=_resolve(Path(input_path), base_dir),
            output_filename=filename,
            output_file_path=_resolve(Path(output_path), base_dir),
        )


def load_generator_config(config_path: Path) -> GeneratorConfig:
    """Load the generator configuration from a TOML or JSON file.

    TOML files may carry the options at top level or under `[tool.flagpack]`,
    so a project's pyproject.toml can be used directly.

    Raises:
        ConfigError: If the file is missing, unreadable or incomplete
    """
    logger.debug("Loading generator configuration", path=str(config_path))

    try:
        raw = config_path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Unable to read generator configuration '{config_path}': {e}") from e

    if config_path.suffix == ".json":
        data = _parse_json_config(raw, config_path)
    else:
        data = _parse_toml_config(raw, config_path)

    config = GeneratorConfig.from_mapping(data, base_dir=config_path.parent)
    logger.debug(
        "Generator configuration loaded",
        input=str(config.input_file_path),
        output=str(config.output_file),
    )
    return config


def _parse_json_config(raw: bytes, config_path: Path) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid JSON in generator configuration '{config_path}': {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Generator configuration '{config_path}' must be a JSON object")
    return data


def _parse_toml_config(raw: bytes, config_path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid TOML in generator configuration '{config_path}': {e}") from e

    # [tool.flagpack] takes precedence so pyproject.toml works unchanged
    tool = data.get("tool")
    tool_table = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    if isinstance(tool_table, dict):
        return tool_table
    return data


def _required_str(data: dict[str, Any], name: str) -> str:
    value = data.get(name)
    if value is None:
        raise ConfigError(f"Generator configuration is missing '{name}'")
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{name}' must be a non-empty string")
    return value


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if base_dir is None or path.is_absolute():
        return path
    return base_dir / path


__all__ = ["GeneratorConfig", "load_generator_config"]

# 🚩📦🔚
