# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path


class EngineDefaults:
    COMMAND = "cargo run --release --"
    COOLDOWN_SECONDS = 0.0


class OutputDefaults:
    ARTIFACT_DIRECTORY = Path(".")
    ARTIFACT_SUFFIX = ".out"
    NAME_WITH_SLICE_COUNT = False
    WRITE_MANIFEST = True


class LoggingDefaults:
    LEVEL = "INFO"
