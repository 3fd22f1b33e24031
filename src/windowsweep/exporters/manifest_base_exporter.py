# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for sweep manifest exporters."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from windowsweep.exporters.manifest_exporter_config import ManifestExporterConfig

logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = (
    "label",
    "query",
    "window_size",
    "window_slice_count",
    "window_slide",
    "artifact",
    "return_code",
    "artifact_bytes",
    "elapsed_seconds",
    "success",
    "error",
)


class ManifestBaseExporter(ABC):
    """Writes a record of every run in a sweep next to its artifacts.

    Subclasses choose the file name and render the content; writing is shared.
    """

    def __init__(self, config: ManifestExporterConfig) -> None:
        self._config = config
        self._results = config.results

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the manifest file name."""

    @abstractmethod
    def _generate_content(self) -> str:
        """Return the full manifest file content."""

    def _rows(self) -> list[dict[str, Any]]:
        """One flat record per run, keyed by MANIFEST_COLUMNS."""
        rows = []
        for result in self._results:
            config = result.configuration
            rows.append(
                {
                    "label": result.label,
                    "query": config.query.value,
                    "window_size": config.window_size,
                    "window_slice_count": config.window_slice_count,
                    "window_slide": config.window_slide,
                    "artifact": result.artifact_path.name
                    if result.artifact_path
                    else None,
                    "return_code": result.return_code,
                    "artifact_bytes": result.artifact_bytes,
                    "elapsed_seconds": round(result.elapsed_seconds, 3),
                    "success": result.success,
                    "error": result.error,
                }
            )
        return rows

    def export(self) -> Path:
        """Write the manifest and return its path."""
        output_dir = Path(self._config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / self.get_file_name()
        path.write_text(self._generate_content(), encoding="utf-8")
        logger.info(f"Wrote sweep manifest: {path}")
        return path
