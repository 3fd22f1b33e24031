# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from windowsweep.common.config.base_config import BaseConfig
from windowsweep.common.config.cli_parameter import CLIParameter
from windowsweep.common.config.config_defaults import (
    EngineDefaults,
    LoggingDefaults,
    OutputDefaults,
)
from windowsweep.common.config.groups import Groups
from windowsweep.common.config.sweep_config import (
    EngineConfig,
    OutputConfig,
    SweepConfig,
    SweepParameters,
)

__all__ = [
    "BaseConfig",
    "CLIParameter",
    "EngineConfig",
    "EngineDefaults",
    "Groups",
    "LoggingDefaults",
    "OutputConfig",
    "OutputDefaults",
    "SweepConfig",
    "SweepParameters",
]
