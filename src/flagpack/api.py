#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for the flagpack generator."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger

from flagpack.codegen.generator import FeatureGenerator
from flagpack.config.generator import GeneratorConfig, load_generator_config
from flagpack.manifest.parser import load_manifest


def generate_from_config(config: GeneratorConfig) -> Path:
    """Generate the accessor module described by a generator configuration.

    Reads the manifest at `config.input_file_path`, emits the enumeration,
    the `FeatureFlagManager` protocol and a facade class named
    `config.output_filename`, and writes it to
    `config.output_file_path / f"{config.output_filename}.py"`.

    Nothing is written unless every step before the write succeeds, and the
    write itself is atomic, so a failed run never leaves a partial file.

    Args:
        config: Generator configuration

    Returns:
        Path of the generated module

    Raises:
        ManifestError: If the manifest cannot be read or is invalid
        GenerationError: If the facade name cannot be used
        OutputError: If the output cannot be written

    Example:
        ```python
        from pathlib import Path
        from flagpack import GeneratorConfig, generate_from_config

        config = GeneratorConfig(
            input_file_path=Path("features.json"),
            output_filename="Features",
            output_file_path=Path("src/app"),
        )
        print(generate_from_config(config))
        ```
    """
    logger.info(
        "Generating feature accessors",
        manifest=str(config.input_file_path),
        output=str(config.output_file),
    )
    manifest = load_manifest(config.input_file_path)
    source = FeatureGenerator(config.output_filename).generate(manifest)
    return source.write(config.output_file_path)


def generate_from_config_file(config_path: Path) -> Path:
    """Load a generator configuration file and run generation.

    Raises:
        ConfigError: If the configuration cannot be loaded
        ManifestError, GenerationError, OutputError: As for generate_from_config
    """
    return generate_from_config(load_generator_config(config_path))


# 🚩📦🔚
