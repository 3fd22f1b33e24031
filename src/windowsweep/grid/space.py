# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration space of a window-query sweep.

The space is the cross product of query kinds, window sizes and window slice
counts. Each point carries a derived window slide: the number of time units the
window advances per slice.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

__all__ = [
    "QUERY_KINDS",
    "WINDOW_SIZES",
    "WINDOW_SLICE_COUNTS",
    "GridPoint",
    "QueryKind",
    "SweepGrid",
    "derive_slide",
]


class QueryKind(str, Enum):
    """Windowed aggregation queries implemented on the FASTER state backend.

    Each kind combines a window generation (1, 2 or 3) with an aggregation
    mode ("count" or "rank"). The value is the engine's query selector.
    """

    WINDOW_1_FASTER_COUNT = "window_1_faster_count"
    WINDOW_1_FASTER_RANK = "window_1_faster_rank"
    WINDOW_2_FASTER_COUNT = "window_2_faster_count"
    WINDOW_2_FASTER_RANK = "window_2_faster_rank"
    WINDOW_3_FASTER_COUNT = "window_3_faster_count"
    WINDOW_3_FASTER_RANK = "window_3_faster_rank"

    def __str__(self) -> str:
        return self.value

    @property
    def generation(self) -> int:
        """Window generation, e.g. 2 for window_2_faster_rank."""
        return int(self.value.split("_")[1])

    @property
    def aggregation(self) -> str:
        """Aggregation mode: "count" or "rank"."""
        return self.value.rsplit("_", 1)[1]


QUERY_KINDS: tuple[QueryKind, ...] = tuple(QueryKind)
WINDOW_SIZES: tuple[int, ...] = (1, 5, 10, 100, 1000)
WINDOW_SLICE_COUNTS: tuple[int, ...] = (1, 5, 10, 20, 50, 100)


def derive_slide(size: int, slice_count: int) -> int:
    """Window slide for a window of `size` split into `slice_count` slices.

    Uses floor division, so a slice count larger than the size yields 0.
    """
    return size // slice_count


@dataclass(frozen=True, slots=True)
class GridPoint:
    """One combination of query kind, window size and window slice count."""

    query: QueryKind
    window_size: int
    window_slice_count: int

    @property
    def window_slide(self) -> int:
        return derive_slide(self.window_size, self.window_slice_count)


class SweepGrid(BaseModel):
    """Ordered value sets spanning the sweep.

    Defaults to the standard window experiment grid. Pass alternate tuples to
    sweep a smaller or different space; enumeration order always follows the
    order given here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    query_kinds: Annotated[
        tuple[QueryKind, ...],
        Field(min_length=1, description="Query kinds to run, outermost loop."),
    ] = QUERY_KINDS

    window_sizes: Annotated[
        tuple[PositiveInt, ...],
        Field(min_length=1, description="Window sizes to run, middle loop."),
    ] = WINDOW_SIZES

    window_slice_counts: Annotated[
        tuple[PositiveInt, ...],
        Field(min_length=1, description="Window slice counts to run, innermost loop."),
    ] = WINDOW_SLICE_COUNTS

    @field_validator("query_kinds", "window_sizes", "window_slice_counts")
    @classmethod
    def reject_duplicates(cls, v: tuple) -> tuple:
        """Duplicate values would run the same grid point twice."""
        duplicates = sorted({str(x) for x in v if v.count(x) > 1})
        if duplicates:
            raise ValueError(f"Duplicate grid values: {', '.join(duplicates)}")
        return v

    @property
    def size(self) -> int:
        """Number of grid points before filtering."""
        return (
            len(self.query_kinds)
            * len(self.window_sizes)
            * len(self.window_slice_counts)
        )

    def points(self) -> Iterator[GridPoint]:
        """Yield every grid point: query kind outer, window size middle, slice count inner."""
        for query in self.query_kinds:
            for window_size in self.window_sizes:
                for window_slice_count in self.window_slice_counts:
                    yield GridPoint(query, window_size, window_slice_count)
