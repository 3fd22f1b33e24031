# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Naming and writing of per-run stdout artifacts."""

from collections import defaultdict
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from windowsweep.common.config.config_defaults import OutputDefaults
from windowsweep.orchestrator.models import ExperimentConfiguration

__all__ = [
    "ArtifactNamer",
    "ResultSink",
]


class ArtifactNamer:
    """Derives artifact file names from configurations.

    The default name is <query>-<window size>-<window slide>.out. With
    include_slice_count the slice count is appended before the suffix, which
    keeps names unique even when two slice counts produce the same slide.
    """

    def __init__(
        self,
        include_slice_count: bool = OutputDefaults.NAME_WITH_SLICE_COUNT,
        suffix: str = OutputDefaults.ARTIFACT_SUFFIX,
    ) -> None:
        self.include_slice_count = include_slice_count
        self.suffix = suffix

    def name_for(self, configuration: ExperimentConfiguration) -> str:
        parts = [
            configuration.query.value,
            str(configuration.window_size),
            str(configuration.window_slide),
        ]
        if self.include_slice_count:
            parts.append(str(configuration.window_slice_count))
        return "-".join(parts) + self.suffix

    def find_collisions(
        self, configurations: Iterable[ExperimentConfiguration]
    ) -> dict[str, list[str]]:
        """Return artifact names shared by more than one configuration.

        Returns:
            Dict mapping each colliding name to the labels of the runs using it,
            in enumeration order. Empty when all names are unique.
        """
        labels_by_name: dict[str, list[str]] = defaultdict(list)
        for configuration in configurations:
            labels_by_name[self.name_for(configuration)].append(configuration.label)
        return {
            name: labels for name, labels in labels_by_name.items() if len(labels) > 1
        }


class ResultSink:
    """Persists engine stdout into one artifact file per configuration.

    Existing artifacts with the same name are truncated and replaced; there is
    no versioning or appending.
    """

    def __init__(self, artifact_directory: Path, namer: ArtifactNamer) -> None:
        self.artifact_directory = Path(artifact_directory)
        self.namer = namer

    def path_for(self, configuration: ExperimentConfiguration) -> Path:
        return self.artifact_directory / self.namer.name_for(configuration)

    @contextmanager
    def open(self, configuration: ExperimentConfiguration) -> Iterator[BinaryIO]:
        """Open the artifact for writing in binary mode.

        The yielded file can be passed straight to subprocess as stdout so the
        engine's bytes land on disk verbatim.
        """
        with self.open_path(self.path_for(configuration)) as f:
            yield f

    @contextmanager
    def open_path(self, path: Path) -> Iterator[BinaryIO]:
        """Open an already resolved artifact path, truncating any previous content."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            yield f
