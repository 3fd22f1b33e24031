# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for windowsweep."""

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App
from pydantic import ValidationError

from windowsweep import __version__
from windowsweep.cli_runner import build_sweep_config, run_sweep
from windowsweep.cli_utils import format_validation_error, raise_startup_error_and_exit
from windowsweep.common.config import CLIParameter, Groups
from windowsweep.common.environment import Environment
from windowsweep.common.exceptions import ConfigurationError
from windowsweep.common.logging import setup_rich_logging

app = App(
    name="windowsweep",
    help="Run the FASTER window-query benchmark grid against the streaming engine, "
    "one engine run per valid (query, window size, slice count) combination.",
    version=__version__,
)


@app.default
def sweep(
    rate: Annotated[
        float | None,
        CLIParameter(help="Source rate in records/s.", group=Groups.SWEEP),
    ] = None,
    duration: Annotated[
        float | None,
        CLIParameter(help="Duration of each run in seconds.", group=Groups.SWEEP),
    ] = None,
    workers: Annotated[
        int | None,
        CLIParameter(help="Number of engine workers.", group=Groups.SWEEP),
    ] = None,
    /,
    *,
    engine_command: Annotated[
        str | None,
        CLIParameter(
            name="--engine-command",
            help="Command that launches the engine; per-run flags are appended. "
            "Defaults to WINDOWSWEEP_ENGINE_COMMAND or 'cargo run --release --'.",
            group=Groups.ENGINE,
        ),
    ] = None,
    cooldown_seconds: Annotated[
        float | None,
        CLIParameter(
            name="--cooldown-seconds",
            help="Seconds to wait between consecutive runs.",
            group=Groups.ENGINE,
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        CLIParameter(
            name="--output-dir",
            help="Directory for .out artifacts and the sweep manifest. Defaults to the current directory.",
            group=Groups.OUTPUT,
        ),
    ] = None,
    name_with_slice_count: Annotated[
        bool,
        CLIParameter(
            name="--name-with-slice-count",
            help="Append the slice count to artifact names.",
            group=Groups.OUTPUT,
        ),
    ] = False,
    manifest: Annotated[
        bool,
        CLIParameter(
            name="--manifest",
            help="Write sweep_manifest.json and sweep_manifest.csv after the sweep.",
            group=Groups.OUTPUT,
        ),
    ] = True,
    dry_run: Annotated[
        bool,
        CLIParameter(
            name="--dry-run",
            help="Print the planned engine command lines without running them.",
            group=Groups.OUTPUT,
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        CLIParameter(
            name="--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR).",
            group=Groups.LOGGING,
        ),
    ] = None,
) -> None:
    """Sweep every valid window configuration for one rate, duration and worker count."""
    try:
        setup_rich_logging(log_level or Environment.LOGGING.LEVEL)
    except ValueError as e:
        raise_startup_error_and_exit(str(e))

    try:
        config = build_sweep_config(
            rate,
            duration,
            workers,
            engine_command=engine_command,
            output_dir=output_dir,
            cooldown_seconds=cooldown_seconds,
            name_with_slice_count=name_with_slice_count,
            write_manifest=manifest,
        )
        results = run_sweep(config, dry_run=dry_run)
    except ConfigurationError as e:
        raise_startup_error_and_exit(str(e))
    except ValidationError as e:
        raise_startup_error_and_exit(format_validation_error(e))

    if any(not r.success for r in results):
        sys.exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
