#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the flagpack command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from flagpack.cli import main as cli_main


def _write_config(directory: Path, manifest_file: Path) -> Path:
    config_path = directory / "flagpack.toml"
    config_path.write_text(
        f'inputFilePath = "{manifest_file.as_posix()}"\noutputFilePath = "out"\noutputFilename = "Features"\n'
    )
    return config_path


class TestGenerateCommand:
    """Test the single generate invocation."""

    def test_generates_module(self, tmp_path: Path, manifest_file: Path) -> None:
        config_path = _write_config(tmp_path, manifest_file)

        runner = CliRunner()
        result = runner.invoke(cli_main, [], env={"FLAGPACK_CONFIG": str(config_path)})

        assert result.exit_code == 0, result.output
        assert "Starting to write file Features.py" in result.output
        assert "Finished writing file" in result.output
        assert (tmp_path / "out" / "Features.py").exists()

    def test_missing_config_fails(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, [], env={"FLAGPACK_CONFIG": str(tmp_path / "absent.toml")})

        assert result.exit_code != 0
        assert "Unable to read generator configuration" in result.output

    def test_invalid_manifest_fails_without_output(self, tmp_path: Path) -> None:
        manifest = tmp_path / "features.json"
        manifest.write_text('[{"key": "a-b", "description": "", "value": true}]')
        config_path = _write_config(tmp_path, manifest)

        runner = CliRunner()
        result = runner.invoke(cli_main, [], env={"FLAGPACK_CONFIG": str(config_path)})

        assert result.exit_code != 0
        assert "not a valid public Python identifier" in result.output
        assert not (tmp_path / "out" / "Features.py").exists()

    def test_unwritable_output_fails(self, tmp_path: Path, manifest_file: Path) -> None:
        config_path = _write_config(tmp_path, manifest_file)

        runner = CliRunner()
        with patch("flagpack.codegen.generator.atomic_write_text", side_effect=PermissionError("read-only")):
            result = runner.invoke(cli_main, [], env={"FLAGPACK_CONFIG": str(config_path)})

        assert result.exit_code != 0
        assert "read-only" in result.output

    def test_rejects_arguments(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["extra"])
        assert result.exit_code == 2

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli_main, ["--version"])
        assert result.exit_code == 0
        assert "flagpack version" in result.output


# 🚩📦🔚
