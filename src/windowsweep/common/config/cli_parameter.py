# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from cyclopts import Parameter


def CLIParameter(*args: Any, **kwargs: Any) -> Parameter:  # noqa: N802
    """Build a cyclopts Parameter with the defaults used by every windowsweep option."""
    kwargs.setdefault("show_env_var", False)
    return Parameter(*args, **kwargs)
