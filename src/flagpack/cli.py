#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""flagpack command-line interface entrypoint."""

from __future__ import annotations

from pathlib import Path

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub, logger
from provide.foundation.console import perr, pout
from provide.foundation.utils import get_version

from flagpack.api import generate_from_config
from flagpack.config import FlagpackRuntimeConfig, load_generator_config
from flagpack.exceptions import FlagpackError

__version__ = get_version("flagpack", caller_file=__file__)

RULE_HEAVY = "=" * 40
RULE_LIGHT = "-" * 40


@click.command("flagpack", context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="flagpack",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Generate typed feature flag accessors from a JSON manifest.

    Takes no arguments; everything comes from the generator configuration
    file (inputFilePath, outputFilePath, outputFilename).

    Configure via environment variables:
    - FLAGPACK_CONFIG: Generator configuration file (default: flagpack.toml)
    - FLAGPACK_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = FlagpackRuntimeConfig.from_env()
    _initialize_foundation(ctx, runtime_config)

    config_path = Path(runtime_config.config_path)
    logger.debug("Generator started", config=str(config_path))

    pout(RULE_HEAVY)
    try:
        config = load_generator_config(config_path)
        pout(f"Starting to write file {config.output_file.name}...")
        pout(RULE_LIGHT)
        output_file = generate_from_config(config)
    except FlagpackError as e:
        logger.error("Generation failed", config=str(config_path), error=str(e))
        perr(f"❌ Error: {e}")
        raise click.Abort() from e

    pout(RULE_LIGHT)
    pout(f"✅ Finished writing file {output_file}")
    pout(RULE_HEAVY)


def _initialize_foundation(ctx: click.Context, runtime_config: FlagpackRuntimeConfig) -> None:
    """Initialize Foundation telemetry with flagpack's log level."""
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="flagpack",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )
    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = CLIContext.from_env()


main = cli

if __name__ == "__main__":
    cli()

# 🚩📦🔚
