# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sweep planning, engine invocation and artifact capture."""

from windowsweep.orchestrator.invocation import build_invocation, format_number
from windowsweep.orchestrator.models import (
    ExperimentConfiguration,
    ExperimentInvocation,
    RunResult,
)
from windowsweep.orchestrator.orchestrator import SweepOrchestrator
from windowsweep.orchestrator.sink import ArtifactNamer, ResultSink
from windowsweep.orchestrator.strategies import ExecutionStrategy, GridSweepStrategy

__all__ = [
    "ArtifactNamer",
    "ExecutionStrategy",
    "ExperimentConfiguration",
    "ExperimentInvocation",
    "GridSweepStrategy",
    "ResultSink",
    "RunResult",
    "SweepOrchestrator",
    "build_invocation",
    "format_number",
]
