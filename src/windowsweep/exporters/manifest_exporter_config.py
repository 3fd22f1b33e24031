# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for sweep manifest exporters."""

from dataclasses import dataclass
from pathlib import Path

from windowsweep.common.config import SweepParameters
from windowsweep.orchestrator.models import RunResult


@dataclass(slots=True)
class ManifestExporterConfig:
    """Configuration for sweep manifest exporters.

    Attributes:
        results: Results of every executed run, in execution order
        parameters: Sweep parameters shared by all runs
        output_dir: Directory where the manifest file will be written
    """

    results: list[RunResult]
    parameters: SweepParameters
    output_dir: Path
