# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sequential sweep orchestrator driving the streaming engine."""

import logging
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

from windowsweep.orchestrator.invocation import build_invocation
from windowsweep.orchestrator.models import (
    ExperimentConfiguration,
    ExperimentInvocation,
    RunResult,
)
from windowsweep.orchestrator.sink import ResultSink
from windowsweep.orchestrator.strategies import ExecutionStrategy

logger = logging.getLogger(__name__)

__all__ = [
    "SweepOrchestrator",
]

_STDERR_TAIL_CHARS = 2000


class SweepOrchestrator:
    """Executes the configurations planned by a strategy, one engine run at a time.

    Runs never overlap: each engine process must exit and its stdout must be
    fully written to the artifact before the next one starts. A failed run is
    recorded and the sweep moves on; only an operator interrupt stops it early.
    """

    def __init__(self, base_dir: Path, engine_command: Sequence[str]):
        """Initialize SweepOrchestrator.

        Args:
            base_dir: Directory that receives the artifacts
            engine_command: Program and leading arguments used to launch the engine
        """
        self.base_dir = Path(base_dir)
        self.engine_command = tuple(engine_command)

    def plan(
        self, strategy: ExecutionStrategy
    ) -> list[tuple[ExperimentConfiguration, ExperimentInvocation]]:
        """Resolve every planned configuration to its invocation without running it."""
        strategy.validate_config()
        return [
            (config, build_invocation(config, self.engine_command))
            for config in strategy.planned_configs()
        ]

    def execute(self, strategy: ExecutionStrategy) -> list[RunResult]:
        """Execute runs based on strategy.

        Args:
            strategy: Execution strategy that decides what to run

        Returns:
            List of RunResult, one per run executed, in execution order
        """
        results: list[RunResult] = []
        run_index = 0
        total = len(strategy.planned_configs())
        sink = ResultSink(self.base_dir, strategy.namer)

        strategy.validate_config()

        logger.info(
            f"Starting sweep of {total} runs with strategy: {strategy.__class__.__name__}"
        )

        should_continue = strategy.should_continue(results)

        while should_continue:
            config = strategy.get_next_config(results)
            label = strategy.get_run_label(run_index)
            artifact_path = strategy.get_run_path(self.base_dir, run_index)

            logger.info(
                f"[{run_index + 1}/{total}] Running experiment with window slide "
                f"{config.window_slide} and count {config.window_slice_count} ({label})"
            )

            result = self._execute_single_run(config, sink, artifact_path, label)
            results.append(result)

            if result.success:
                logger.info(
                    f"[{run_index + 1}/{total}] {label} completed in "
                    f"{result.elapsed_seconds:.1f}s -> {result.artifact_path}"
                )
            else:
                logger.error(f"[{run_index + 1}/{total}] {label} failed: {result.error}")

            run_index += 1

            should_continue = strategy.should_continue(results)

            if should_continue:
                cooldown = strategy.get_cooldown_seconds()
                if cooldown > 0:
                    logger.info(f"Applying cooldown: {cooldown}s")
                    time.sleep(cooldown)

        successful = sum(1 for r in results if r.success)
        logger.info(f"All runs complete: {successful}/{len(results)} successful")

        return results

    def _execute_single_run(
        self,
        config: ExperimentConfiguration,
        sink: ResultSink,
        artifact_path: Path,
        label: str,
    ) -> RunResult:
        """Run the engine for one configuration with stdout captured into its artifact.

        The engine's exit status and output size are recorded but never raise;
        a failure here only marks this run as unsuccessful.

        Args:
            config: Configuration to execute
            sink: Result sink that opens the artifact file
            artifact_path: Artifact path chosen by the strategy for this run
            label: Label of this run

        Returns:
            RunResult with exit status, artifact size and error text if any
        """
        invocation = build_invocation(config, self.engine_command)
        logger.debug(f"Invoking: {invocation.render()}")

        start = time.perf_counter()
        try:
            with sink.open_path(artifact_path) as stdout:
                # No timeout: the engine stops itself after --duration seconds
                completed = subprocess.run(
                    invocation.argv,
                    stdin=subprocess.DEVNULL,
                    stdout=stdout,
                    stderr=subprocess.PIPE,
                    check=False,
                )
        except Exception as e:
            logger.exception(f"Error executing run {label}")
            return RunResult(
                label=label,
                configuration=config,
                success=False,
                artifact_path=artifact_path,
                artifact_bytes=_artifact_size(artifact_path),
                elapsed_seconds=time.perf_counter() - start,
                error=f"Failed to launch engine: {e}",
            )
        elapsed = time.perf_counter() - start
        artifact_bytes = _artifact_size(artifact_path)

        error = None
        if completed.returncode != 0:
            error = f"Engine exited with code {completed.returncode}"
            stderr = completed.stderr.decode(errors="replace").strip()
            if stderr:
                error += f"\nStderr: {stderr[-_STDERR_TAIL_CHARS:]}"
        elif artifact_bytes == 0:
            error = "Engine exited successfully but wrote no output"

        return RunResult(
            label=label,
            configuration=config,
            success=error is None,
            return_code=completed.returncode,
            artifact_path=artifact_path,
            artifact_bytes=artifact_bytes,
            elapsed_seconds=elapsed,
            error=error,
        )


def _artifact_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return 0
