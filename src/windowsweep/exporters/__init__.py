# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sweep manifest exporters."""

from windowsweep.exporters.manifest_base_exporter import (
    MANIFEST_COLUMNS,
    ManifestBaseExporter,
)
from windowsweep.exporters.manifest_csv_exporter import ManifestCsvExporter
from windowsweep.exporters.manifest_exporter_config import ManifestExporterConfig
from windowsweep.exporters.manifest_json_exporter import ManifestJsonExporter

__all__ = [
    "MANIFEST_COLUMNS",
    "ManifestBaseExporter",
    "ManifestCsvExporter",
    "ManifestExporterConfig",
    "ManifestJsonExporter",
]
