# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment variable settings for windowsweep.

All settings are read once at import time and can be overridden with
environment variables using the WINDOWSWEEP_ prefix, e.g.
WINDOWSWEEP_ENGINE_COMMAND="target/release/nexmark".
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from windowsweep.common.config.config_defaults import EngineDefaults, LoggingDefaults

__all__ = [
    "Environment",
]


class _EngineSettings(BaseSettings):
    """Settings for locating and launching the streaming engine."""

    model_config = SettingsConfigDict(env_prefix="WINDOWSWEEP_ENGINE_")

    COMMAND: str = Field(
        default=EngineDefaults.COMMAND,
        description="Command line used to launch the engine. Split with shell rules; "
        "per-run flags are appended after it.",
    )


class _LoggingSettings(BaseSettings):
    """Settings for log output."""

    model_config = SettingsConfigDict(env_prefix="WINDOWSWEEP_LOG_")

    LEVEL: str = Field(
        default=LoggingDefaults.LEVEL,
        description="Default log level when --log-level is not given.",
    )


class _Environment(BaseSettings):
    """Root settings object grouping all windowsweep environment settings."""

    model_config = SettingsConfigDict(env_prefix="WINDOWSWEEP_")

    ENGINE: _EngineSettings = Field(default_factory=_EngineSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
