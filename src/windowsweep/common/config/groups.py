# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """CLI help groups, in the order they are shown."""

    SWEEP = Group.create_ordered("Sweep Parameters")
    ENGINE = Group.create_ordered("Engine")
    OUTPUT = Group.create_ordered("Output")
    LOGGING = Group.create_ordered("Logging")
