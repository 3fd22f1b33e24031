# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Execution strategies for sweep orchestration."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from windowsweep.common.config import SweepParameters
from windowsweep.common.config.config_defaults import EngineDefaults
from windowsweep.common.exceptions import ArtifactNameCollisionError
from windowsweep.grid.space import SweepGrid
from windowsweep.grid.validity import admitted_points
from windowsweep.orchestrator.models import ExperimentConfiguration, RunResult
from windowsweep.orchestrator.sink import ArtifactNamer

logger = logging.getLogger(__name__)

__all__ = [
    "ExecutionStrategy",
    "GridSweepStrategy",
]


class ExecutionStrategy(ABC):
    """Base class for execution strategies.

    Strategies decide:
    1. What config to run next (based on results so far)
    2. Whether to continue or stop
    3. How to label runs
    4. How artifacts are named
    5. Cooldown duration between runs

    The orchestrator only executes what the strategy hands it, so a strategy
    can be drained by a different executor without changing how work is
    planned.
    """

    namer: ArtifactNamer

    def validate_config(self) -> None:  # noqa: B027
        """Validate the planned work before the first run.

        Override this method to add strategy-specific validation.
        Called by orchestrator before starting execution.
        """

    @abstractmethod
    def should_continue(self, results: list[RunResult]) -> bool:
        """Decide whether to run another configuration.

        Args:
            results: Results from runs executed so far

        Returns:
            True if should run another configuration, False to stop
        """

    @abstractmethod
    def get_next_config(self, results: list[RunResult]) -> ExperimentConfiguration:
        """Return the configuration for the next run.

        Args:
            results: Results from runs executed so far

        Returns:
            Configuration for next run
        """

    @abstractmethod
    def get_run_label(self, run_index: int) -> str:
        """Generate label for run at given index."""

    @abstractmethod
    def get_run_path(self, base_dir: Path, run_index: int) -> Path:
        """Return the artifact path for the run at given index."""

    @abstractmethod
    def get_cooldown_seconds(self) -> float:
        """Return cooldown duration between runs."""

    @abstractmethod
    def planned_configs(self) -> tuple[ExperimentConfiguration, ...]:
        """Return every configuration this strategy will hand out, in order."""


class GridSweepStrategy(ExecutionStrategy):
    """Strategy that runs every admitted point of a sweep grid once.

    The queue of configurations is planned when the strategy is created:
    grid points are enumerated (query kind outer, window size middle, slice
    count inner), points with a zero slide are dropped, and each survivor is
    resolved against the shared sweep parameters.

    Attributes:
        grid: Grid being swept
        parameters: Rate, duration and worker count shared by all runs
        namer: Artifact namer used for collision checks and by the sink
        cooldown_seconds: Sleep duration between runs
    """

    def __init__(
        self,
        grid: SweepGrid,
        parameters: SweepParameters,
        namer: ArtifactNamer | None = None,
        cooldown_seconds: float = EngineDefaults.COOLDOWN_SECONDS,
    ) -> None:
        """Initialize GridSweepStrategy.

        Raises:
            ValueError: If cooldown_seconds < 0
        """
        if cooldown_seconds < 0:
            raise ValueError(
                f"Invalid cooldown duration: {cooldown_seconds} seconds. "
                f"Cooldown must be non-negative (0 or greater). "
                f"Use 0 for no cooldown, or a positive value like 10 for a 10-second pause between runs."
            )

        self.grid = grid
        self.parameters = parameters
        self.namer = namer or ArtifactNamer()
        self.cooldown_seconds = cooldown_seconds
        self._queue = tuple(
            ExperimentConfiguration.from_grid_point(point, parameters)
            for point in admitted_points(grid.points())
        )

    def planned_configs(self) -> tuple[ExperimentConfiguration, ...]:
        return self._queue

    def validate_config(self) -> None:
        """Refuse to start when two runs would write the same artifact.

        Raises:
            ArtifactNameCollisionError: If any artifact name is shared
        """
        collisions = self.namer.find_collisions(self._queue)
        if collisions:
            raise ArtifactNameCollisionError(collisions)
        if not self._queue:
            logger.warning(
                "No grid point has a window slide of at least 1; nothing to run."
            )

    def should_continue(self, results: list[RunResult]) -> bool:
        """Continue until every planned configuration has run."""
        return len(results) < len(self._queue)

    def get_next_config(self, results: list[RunResult]) -> ExperimentConfiguration:
        return self._queue[len(results)]

    def get_run_label(self, run_index: int) -> str:
        """Label of the configuration at run_index, e.g. window_1_faster_count_size_10_slices_5."""
        return self._queue[run_index].label

    def get_run_path(self, base_dir: Path, run_index: int) -> Path:
        """Artifact path for the run at run_index, e.g. base_dir/window_1_faster_count-10-2.out."""
        return Path(base_dir) / self.namer.name_for(self._queue[run_index])

    def get_cooldown_seconds(self) -> float:
        """Return configured cooldown duration."""
        return self.cooldown_seconds
