# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from pathlib import Path

from rich.console import Console

from windowsweep.common.config import (
    EngineConfig,
    OutputConfig,
    SweepConfig,
    SweepParameters,
)
from windowsweep.exporters import (
    ManifestCsvExporter,
    ManifestExporterConfig,
    ManifestJsonExporter,
)
from windowsweep.grid.space import SweepGrid
from windowsweep.orchestrator.invocation import format_number
from windowsweep.orchestrator.models import RunResult
from windowsweep.orchestrator.orchestrator import SweepOrchestrator
from windowsweep.orchestrator.sink import ArtifactNamer
from windowsweep.orchestrator.strategies import GridSweepStrategy

logger = logging.getLogger(__name__)


def build_sweep_config(
    rate: float | None,
    duration: float | None,
    workers: int | None,
    *,
    engine_command: str | list[str] | None = None,
    output_dir: Path | None = None,
    cooldown_seconds: float | None = None,
    name_with_slice_count: bool | None = None,
    write_manifest: bool | None = None,
    grid: SweepGrid | None = None,
) -> SweepConfig:
    """Assemble a SweepConfig from CLI inputs, leaving unset options at their defaults.

    Raises:
        MissingParameterError: If rate, duration or workers is missing
        pydantic.ValidationError: If any value is out of range
    """
    parameters = SweepParameters.from_inputs(rate, duration, workers)

    engine_kwargs = {}
    if engine_command is not None:
        engine_kwargs["command"] = engine_command
    if cooldown_seconds is not None:
        engine_kwargs["cooldown_seconds"] = cooldown_seconds

    output_kwargs = {}
    if output_dir is not None:
        output_kwargs["artifact_directory"] = output_dir
    if name_with_slice_count is not None:
        output_kwargs["name_with_slice_count"] = name_with_slice_count
    if write_manifest is not None:
        output_kwargs["write_manifest"] = write_manifest

    return SweepConfig(
        parameters=parameters,
        grid=grid or SweepGrid(),
        engine=EngineConfig(**engine_kwargs),
        output=OutputConfig(**output_kwargs),
    )


def build_strategy(config: SweepConfig) -> GridSweepStrategy:
    return GridSweepStrategy(
        grid=config.grid,
        parameters=config.parameters,
        namer=ArtifactNamer(include_slice_count=config.output.name_with_slice_count),
        cooldown_seconds=config.engine.cooldown_seconds,
    )


def run_sweep(
    config: SweepConfig, dry_run: bool = False, console: Console | None = None
) -> list[RunResult]:
    """Run the full sweep described by config.

    In dry-run mode each planned command line is printed to stdout and nothing
    is executed or written.

    Raises:
        ArtifactNameCollisionError: If two planned runs share an artifact name

    Returns:
        One RunResult per executed run; empty for a dry run
    """
    parameters = config.parameters
    strategy = build_strategy(config)
    orchestrator = SweepOrchestrator(
        base_dir=config.output.artifact_directory,
        engine_command=config.engine.command,
    )

    logger.info("=" * 80)
    logger.info(f"Source rate is {format_number(parameters.rate)}")
    logger.info(f"Duration is {format_number(parameters.duration)}")
    logger.info(f"Number of workers is {parameters.workers}")
    logger.info(
        f"  Grid: {len(config.grid.query_kinds)} queries x "
        f"{len(config.grid.window_sizes)} window sizes x "
        f"{len(config.grid.window_slice_counts)} slice counts "
        f"({len(strategy.planned_configs())}/{config.grid.size} runnable)"
    )
    logger.info(f"  Artifacts: {config.output.artifact_directory.resolve()}")
    logger.info("=" * 80)

    if dry_run:
        console = console or Console()
        for sweep_config, invocation in orchestrator.plan(strategy):
            console.print(
                f"{strategy.namer.name_for(sweep_config)}: {invocation.render()}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        return []

    results = orchestrator.execute(strategy)

    if config.output.write_manifest:
        exporter_config = ManifestExporterConfig(
            results=results,
            parameters=parameters,
            output_dir=config.output.artifact_directory,
        )
        for exporter_class in (ManifestJsonExporter, ManifestCsvExporter):
            exporter_class(exporter_config).export()

    failed_runs = [r for r in results if not r.success]
    logger.info("=" * 80)
    logger.info(
        f"Sweep complete: {len(results) - len(failed_runs)}/{len(results)} successful"
    )
    if failed_runs:
        logger.warning(f"Failed runs: {', '.join(r.label for r in failed_runs)}")
    logger.info("=" * 80)

    return results
