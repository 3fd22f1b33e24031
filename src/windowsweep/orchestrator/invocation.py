# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Translate an experiment configuration into an engine command line."""

from collections.abc import Sequence

from windowsweep.orchestrator.models import ExperimentConfiguration, ExperimentInvocation

__all__ = [
    "ENGINE_RUNTIME_SEPARATOR",
    "build_invocation",
    "format_number",
]

# Everything after this token is handed to the engine's dataflow runtime
# rather than to its query options.
ENGINE_RUNTIME_SEPARATOR = "--"


def format_number(value: float | int) -> str:
    """Render a numeric flag value, dropping the fraction of integral floats.

    The engine parses rate and duration as integers, so 100.0 must be passed
    as "100". Non-integral values are passed through unchanged.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_invocation(
    configuration: ExperimentConfiguration, engine_command: Sequence[str]
) -> ExperimentInvocation:
    """Build the engine argv for one configuration.

    The caller guarantees the configuration has already been admitted; no
    checks happen here. The same inputs always produce the same argv.

    Args:
        configuration: Admitted experiment configuration
        engine_command: Program and leading arguments, e.g. cargo run --release --

    Returns:
        ExperimentInvocation with the query flags followed by the worker count
        on the runtime side of the separator
    """
    argv = [
        *engine_command,
        "--duration",
        format_number(configuration.duration),
        "--rate",
        format_number(configuration.rate),
        "--window-slice-count",
        str(configuration.window_slice_count),
        "--window-slide",
        str(configuration.window_slide),
        "--queries",
        configuration.query.value,
        ENGINE_RUNTIME_SEPARATOR,
        "-w",
        str(configuration.workers),
    ]
    return ExperimentInvocation(argv=tuple(argv))
