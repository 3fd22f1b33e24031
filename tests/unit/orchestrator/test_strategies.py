# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for execution strategies."""

import logging
from pathlib import Path

import pytest

from windowsweep.common.exceptions import ArtifactNameCollisionError
from windowsweep.grid.space import QueryKind, SweepGrid
from windowsweep.orchestrator.models import RunResult
from windowsweep.orchestrator.sink import ArtifactNamer
from windowsweep.orchestrator.strategies import GridSweepStrategy


def completed(strategy: GridSweepStrategy, count: int) -> list[RunResult]:
    return [
        RunResult(label=config.label, configuration=config, success=True)
        for config in strategy.planned_configs()[:count]
    ]


class TestGridSweepStrategy:
    def test_default_grid_plans_108_runs(self, parameters):
        strategy = GridSweepStrategy(SweepGrid(), parameters)
        planned = strategy.planned_configs()

        assert len(planned) == 108
        assert all(c.window_slide >= 1 for c in planned)
        assert len({c.label for c in planned}) == 108

    def test_plan_follows_enumeration_order(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters)
        assert [c.label for c in strategy.planned_configs()] == [
            "window_1_faster_count_size_1_slices_1",
            "window_1_faster_count_size_100_slices_1",
            "window_1_faster_count_size_100_slices_5",
            "window_1_faster_count_size_100_slices_20",
            "window_2_faster_rank_size_1_slices_1",
            "window_2_faster_rank_size_100_slices_1",
            "window_2_faster_rank_size_100_slices_5",
            "window_2_faster_rank_size_100_slices_20",
        ]

    def test_queue_is_drained_in_order(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters)
        planned = strategy.planned_configs()

        for index in range(len(planned)):
            results = completed(strategy, index)
            assert strategy.should_continue(results) is True
            assert strategy.get_next_config(results) == planned[index]
            assert strategy.get_run_label(index) == planned[index].label

        assert strategy.should_continue(completed(strategy, len(planned))) is False

    def test_planned_configs_carry_parameters(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters)
        for config in strategy.planned_configs():
            assert (config.rate, config.duration, config.workers) == (100, 10, 4)

    def test_default_namer(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters)
        assert isinstance(strategy.namer, ArtifactNamer)
        assert strategy.namer.include_slice_count is False

    def test_run_paths_follow_artifact_names(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters)
        base_dir = Path("/results")

        paths = [
            strategy.get_run_path(base_dir, index)
            for index in range(len(strategy.planned_configs()))
        ]

        assert paths[:4] == [
            base_dir / "window_1_faster_count-1-1.out",
            base_dir / "window_1_faster_count-100-100.out",
            base_dir / "window_1_faster_count-100-20.out",
            base_dir / "window_1_faster_count-100-5.out",
        ]
        assert len(set(paths)) == len(paths)

    def test_run_path_uses_configured_namer(self, parameters, small_grid):
        strategy = GridSweepStrategy(
            small_grid, parameters, namer=ArtifactNamer(include_slice_count=True)
        )

        assert strategy.get_run_path(Path("out"), 3) == Path(
            "out/window_1_faster_count-100-5-20.out"
        )

    def test_negative_cooldown_rejected(self, parameters, small_grid):
        with pytest.raises(ValueError, match="Cooldown must be non-negative"):
            GridSweepStrategy(small_grid, parameters, cooldown_seconds=-1)

    def test_cooldown_is_returned(self, parameters, small_grid):
        strategy = GridSweepStrategy(small_grid, parameters, cooldown_seconds=2.5)
        assert strategy.get_cooldown_seconds() == 2.5

    def test_validate_config_accepts_default_grid(self, parameters):
        GridSweepStrategy(SweepGrid(), parameters).validate_config()

    def test_validate_config_rejects_colliding_names(self, parameters):
        grid = SweepGrid(
            query_kinds=(QueryKind.WINDOW_1_FASTER_COUNT,),
            window_sizes=(10,),
            window_slice_counts=(4, 5),
        )
        strategy = GridSweepStrategy(grid, parameters)

        with pytest.raises(ArtifactNameCollisionError) as exc_info:
            strategy.validate_config()

        assert "window_1_faster_count-10-2.out" in exc_info.value.collisions
        assert "--name-with-slice-count" in str(exc_info.value)

    def test_validate_config_with_slice_count_names(self, parameters):
        grid = SweepGrid(window_sizes=(10,), window_slice_counts=(4, 5))
        strategy = GridSweepStrategy(
            grid, parameters, namer=ArtifactNamer(include_slice_count=True)
        )
        strategy.validate_config()

    def test_empty_plan_warns(self, parameters, caplog):
        grid = SweepGrid(window_sizes=(1,), window_slice_counts=(5, 10))
        strategy = GridSweepStrategy(grid, parameters)

        with caplog.at_level(logging.WARNING):
            strategy.validate_config()

        assert strategy.planned_configs() == ()
        assert "nothing to run" in caplog.text
