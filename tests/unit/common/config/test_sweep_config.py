# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for sweep configuration models."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from windowsweep.common.config import (
    EngineConfig,
    OutputConfig,
    SweepConfig,
    SweepParameters,
)
from windowsweep.common.environment import Environment, _EngineSettings
from windowsweep.common.exceptions import ConfigurationError, MissingParameterError
from windowsweep.grid.space import SweepGrid


class TestSweepParameters:
    @pytest.mark.parametrize(
        "inputs,parameter,message",
        [
            ((None, 10, 4), "rate", "Please provide the source rate in records/s"),
            ((100, None, 4), "duration", "Please provide the duration in s"),
            ((100, 10, None), "workers", "Please provide the number of workers"),
            ((None, None, None), "rate", "Please provide the source rate in records/s"),
        ],
    )
    def test_missing_input_names_parameter(self, inputs, parameter, message):
        with pytest.raises(MissingParameterError) as exc_info:
            SweepParameters.from_inputs(*inputs)

        assert exc_info.value.parameter == parameter
        assert str(exc_info.value) == message
        assert isinstance(exc_info.value, ConfigurationError)

    def test_from_inputs(self):
        parameters = SweepParameters.from_inputs(100, 10, 4)
        assert (parameters.rate, parameters.duration, parameters.workers) == (100, 10, 4)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rate": 0, "duration": 10, "workers": 4},
            {"rate": 100, "duration": -1, "workers": 4},
            {"rate": 100, "duration": 10, "workers": 0},
        ],
    )
    def test_non_positive_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            SweepParameters(**kwargs)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            SweepParameters(rate=1, duration=1, workers=1, threads=2)


class TestEngineConfig:
    def test_default_command_comes_from_environment(self):
        with patch.object(Environment.ENGINE, "COMMAND", "target/release/nexmark"):
            assert EngineConfig().command == ["target/release/nexmark"]

    def test_builtin_default_command(self, monkeypatch):
        monkeypatch.delenv("WINDOWSWEEP_ENGINE_COMMAND", raising=False)
        assert _EngineSettings().COMMAND == "cargo run --release --"

    def test_environment_variable_overrides_command(self, monkeypatch):
        monkeypatch.setenv("WINDOWSWEEP_ENGINE_COMMAND", "./target/release/nexmark")
        assert _EngineSettings().COMMAND == "./target/release/nexmark"

    def test_command_string_is_shell_split(self):
        config = EngineConfig(command="'/opt/my engine/nexmark' --threads-pinned")
        assert config.command == ["/opt/my engine/nexmark", "--threads-pinned"]

    def test_command_list_is_kept(self):
        assert EngineConfig(command=["a", "b"]).command == ["a", "b"]

    def test_empty_command_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(command="")

    def test_negative_cooldown_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(command="x", cooldown_seconds=-0.5)


class TestSweepConfig:
    def test_defaults(self):
        config = SweepConfig(
            parameters=SweepParameters(rate=100, duration=10, workers=4),
            engine=EngineConfig(command="nexmark"),
        )
        assert config.grid == SweepGrid()
        assert config.output == OutputConfig()
        assert config.output.artifact_directory == Path(".")
        assert config.output.name_with_slice_count is False
        assert config.output.write_manifest is True
        assert config.engine.cooldown_seconds == 0.0
