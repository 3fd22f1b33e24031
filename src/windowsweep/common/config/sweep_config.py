# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shlex
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator

from windowsweep.common.config.base_config import BaseConfig
from windowsweep.common.config.config_defaults import EngineDefaults, OutputDefaults
from windowsweep.common.exceptions import MissingParameterError
from windowsweep.grid.space import SweepGrid


def _default_engine_command() -> list[str]:
    # Imported here to keep environment loading out of the config import chain
    from windowsweep.common.environment import Environment

    return shlex.split(Environment.ENGINE.COMMAND)


class SweepParameters(BaseConfig):
    """The three top-level parameters shared by every run in a sweep."""

    rate: Annotated[
        float,
        Field(
            gt=0,
            description="Source event rate in records per second.",
        ),
    ]

    duration: Annotated[
        float,
        Field(
            gt=0,
            description="Duration of each engine run in seconds.",
        ),
    ]

    workers: Annotated[
        int,
        Field(
            ge=1,
            description="Number of engine worker threads.",
        ),
    ]

    @classmethod
    def from_inputs(
        cls,
        rate: float | None,
        duration: float | None,
        workers: int | None,
    ) -> "SweepParameters":
        """Build parameters from possibly-missing CLI inputs.

        Presence is checked in the order rate, duration, workers, and the first
        missing parameter is reported.

        Raises:
            MissingParameterError: If any of the three inputs is None
            pydantic.ValidationError: If a value is present but out of range
        """
        if rate is None:
            raise MissingParameterError(
                "rate", "Please provide the source rate in records/s"
            )
        if duration is None:
            raise MissingParameterError("duration", "Please provide the duration in s")
        if workers is None:
            raise MissingParameterError(
                "workers", "Please provide the number of workers"
            )
        return cls(rate=rate, duration=duration, workers=workers)


class EngineConfig(BaseConfig):
    """How the streaming engine is launched."""

    command: Annotated[
        list[str],
        Field(
            default_factory=_default_engine_command,
            min_length=1,
            description="Engine command line. Per-run flags are appended after it. "
            "A string is split using shell rules.",
        ),
    ]

    cooldown_seconds: Annotated[
        float,
        Field(
            ge=0,
            description="Seconds to sleep between consecutive engine runs.",
        ),
    ] = EngineDefaults.COOLDOWN_SECONDS

    @field_validator("command", mode="before")
    @classmethod
    def split_command_string(cls, v: Any) -> Any:
        """Split a single command string such as "cargo run --release --"."""
        if isinstance(v, str):
            return shlex.split(v)
        return v


class OutputConfig(BaseConfig):
    """Where and how run artifacts are written."""

    artifact_directory: Annotated[
        Path,
        Field(
            description="Directory that receives the per-run .out artifacts and the sweep manifest.",
        ),
    ] = OutputDefaults.ARTIFACT_DIRECTORY

    name_with_slice_count: Annotated[
        bool,
        Field(
            description="Append the window slice count to artifact names so that grid "
            "points sharing a window slide never overwrite each other.",
        ),
    ] = OutputDefaults.NAME_WITH_SLICE_COUNT

    write_manifest: Annotated[
        bool,
        Field(
            description="Write sweep_manifest.json and sweep_manifest.csv after the sweep.",
        ),
    ] = OutputDefaults.WRITE_MANIFEST


class SweepConfig(BaseConfig):
    """Complete configuration of one sweep invocation."""

    parameters: SweepParameters
    grid: SweepGrid = Field(default_factory=SweepGrid)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
