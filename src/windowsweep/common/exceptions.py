# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for windowsweep."""

__all__ = [
    "ArtifactNameCollisionError",
    "ConfigurationError",
    "MissingParameterError",
    "WindowSweepError",
]


class WindowSweepError(Exception):
    """Base class for all windowsweep errors."""


class ConfigurationError(WindowSweepError):
    """The sweep cannot start because its configuration is invalid."""


class MissingParameterError(ConfigurationError):
    """A required top-level parameter was not provided.

    Attributes:
        parameter: Name of the missing parameter (e.g., "rate")
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class ArtifactNameCollisionError(ConfigurationError):
    """Two admitted grid points would write to the same artifact file.

    Attributes:
        collisions: Mapping of artifact name to the run labels that share it
    """

    def __init__(self, collisions: dict[str, list[str]]) -> None:
        self.collisions = collisions
        details = "; ".join(
            f"{name} <- {', '.join(labels)}" for name, labels in collisions.items()
        )
        super().__init__(
            f"Artifact names collide for {len(collisions)} file(s): {details}. "
            "Later runs would silently overwrite earlier ones. "
            "Use --name-with-slice-count to include the slice count in artifact names."
        )
