# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for windowsweep tests."""

import logging
import sys

import pytest

from windowsweep.common.config import SweepParameters
from windowsweep.common.logging import LOGGER_NAME
from windowsweep.grid.space import QueryKind, SweepGrid

# Stand-ins for the engine binary. Each echoes its arguments so artifacts can be
# matched back to the invocation that produced them.
ECHO_ENGINE = "import sys; print(' '.join(sys.argv[1:]))"
FAILING_ENGINE = (
    "import sys; print('partial'); sys.stderr.write('engine panicked\\n'); sys.exit(3)"
)
SILENT_ENGINE = "pass"


@pytest.fixture
def parameters() -> SweepParameters:
    """Sweep parameters used by the end-to-end example: 100 rec/s, 10 s, 4 workers."""
    return SweepParameters(rate=100, duration=10, workers=4)


@pytest.fixture
def small_grid() -> SweepGrid:
    """Two queries, two sizes, three slice counts; 2 of 6 points per query are skipped."""
    return SweepGrid(
        query_kinds=(QueryKind.WINDOW_1_FASTER_COUNT, QueryKind.WINDOW_2_FASTER_RANK),
        window_sizes=(1, 100),
        window_slice_counts=(1, 5, 20),
    )


@pytest.fixture
def echo_engine_command() -> list[str]:
    return [sys.executable, "-c", ECHO_ENGINE]


@pytest.fixture
def failing_engine_command() -> list[str]:
    return [sys.executable, "-c", FAILING_ENGINE]


@pytest.fixture
def silent_engine_command() -> list[str]:
    return [sys.executable, "-c", SILENT_ENGINE]


@pytest.fixture(autouse=True)
def reset_windowsweep_logger():
    """Undo any handler or level installed by setup_rich_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
