# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for sweep orchestration."""

import shlex
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from windowsweep.common.config import SweepParameters
from windowsweep.grid.space import GridPoint, QueryKind

__all__ = [
    "ExperimentConfiguration",
    "ExperimentInvocation",
    "RunResult",
]


class ExperimentConfiguration(BaseModel):
    """Fully resolved configuration for a single engine run.

    Only admitted grid points become configurations, so window_slide is always
    at least 1.

    Attributes:
        query: Query kind selector passed to the engine
        window_size: Logical window size
        window_slice_count: Number of slices the window is divided into
        window_slide: Derived slide (window_size // window_slice_count)
        rate: Source rate in records/s
        duration: Run duration in seconds
        workers: Number of engine workers
    """

    model_config = ConfigDict(frozen=True)

    query: QueryKind
    window_size: PositiveInt
    window_slice_count: PositiveInt
    window_slide: PositiveInt
    rate: PositiveFloat
    duration: PositiveFloat
    workers: PositiveInt

    @classmethod
    def from_grid_point(
        cls, point: GridPoint, parameters: SweepParameters
    ) -> "ExperimentConfiguration":
        return cls(
            query=point.query,
            window_size=point.window_size,
            window_slice_count=point.window_slice_count,
            window_slide=point.window_slide,
            rate=parameters.rate,
            duration=parameters.duration,
            workers=parameters.workers,
        )

    @property
    def label(self) -> str:
        """Unique, filesystem-safe label for this grid point."""
        return (
            f"{self.query}_size_{self.window_size}_slices_{self.window_slice_count}"
        )


class ExperimentInvocation(BaseModel):
    """Concrete argv for one engine process.

    Attributes:
        argv: Program and arguments, in order
    """

    model_config = ConfigDict(frozen=True)

    argv: tuple[str, ...]

    def render(self) -> str:
        """Shell-quoted command line, suitable for logs and dry runs."""
        return shlex.join(self.argv)


class RunResult(BaseModel):
    """Result from executing a single engine run.

    Attributes:
        label: Label identifying this run
        configuration: The configuration that was executed
        success: Whether the engine exited with 0 and wrote some output
        return_code: Engine exit status, None if the engine never started
        artifact_path: Path to the captured stdout artifact
        artifact_bytes: Size of the artifact after the run
        elapsed_seconds: Wall-clock time of the run
        error: Error message if run failed
    """

    label: str
    configuration: ExperimentConfiguration
    success: bool
    return_code: int | None = None
    artifact_path: Path | None = None
    artifact_bytes: int = Field(default=0, ge=0)
    elapsed_seconds: float = Field(default=0.0, ge=0)
    error: str | None = None
