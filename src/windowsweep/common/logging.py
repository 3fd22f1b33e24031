# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup for windowsweep using rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "LOGGER_NAME",
    "setup_rich_logging",
]

LOGGER_NAME = "windowsweep"

_LOG_FORMAT = "%(message)s"
_TIME_FORMAT = "%H:%M:%S"


def setup_rich_logging(
    level: int | str = logging.INFO, console: Console | None = None
) -> logging.Logger:
    """Install a RichHandler on the windowsweep logger.

    Calling this more than once replaces the handler rather than stacking them,
    so repeated CLI invocations in the same process do not duplicate output.

    Args:
        level: Log level name or number (e.g., "INFO", logging.DEBUG)
        console: Console to render to. Defaults to stderr so that progress
            output never mixes with anything written to stdout.

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        log_time_format=_TIME_FORMAT,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
