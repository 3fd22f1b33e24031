# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""windowsweep - benchmark sweep orchestrator for streaming window queries."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("windowsweep")
except PackageNotFoundError:
    __version__ = "unknown"
