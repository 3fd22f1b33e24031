# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from typing import NoReturn

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel


def format_validation_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one line per invalid field."""
    lines = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        lines.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "\n".join(lines)


def raise_startup_error_and_exit(
    message: str,
    title: str = "Configuration Error",
    exit_code: int = 1,
    console: Console | None = None,
) -> NoReturn:
    """Print a startup error panel to stderr and exit before any run starts."""
    console = console or Console(stderr=True)
    console.print(
        Panel(message, title=title, title_align="left", border_style="red"),
        markup=False,
        highlight=False,
    )
    sys.exit(exit_code)
