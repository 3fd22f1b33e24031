# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Admission control for grid points."""

from collections.abc import Iterable, Iterator

from windowsweep.grid.space import GridPoint

__all__ = [
    "admitted_points",
    "is_valid",
]


def is_valid(slide: int) -> bool:
    """A window slide is usable only if the window advances by at least one unit."""
    return slide > 0


def admitted_points(points: Iterable[GridPoint]) -> Iterator[GridPoint]:
    """Yield the points whose derived slide is valid, preserving order.

    Rejected points are dropped without any other effect.
    """
    for point in points:
        if is_valid(point.window_slide):
            yield point
