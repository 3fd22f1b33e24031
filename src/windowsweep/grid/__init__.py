# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sweep configuration space and its validity rule."""

from windowsweep.grid.space import (
    QUERY_KINDS,
    WINDOW_SIZES,
    WINDOW_SLICE_COUNTS,
    GridPoint,
    QueryKind,
    SweepGrid,
    derive_slide,
)
from windowsweep.grid.validity import admitted_points, is_valid

__all__ = [
    "QUERY_KINDS",
    "WINDOW_SIZES",
    "WINDOW_SLICE_COUNTS",
    "GridPoint",
    "QueryKind",
    "SweepGrid",
    "admitted_points",
    "derive_slide",
    "is_valid",
]
