# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for the sweep manifest."""

import csv
import io

from windowsweep.exporters.manifest_base_exporter import (
    MANIFEST_COLUMNS,
    ManifestBaseExporter,
)


class ManifestCsvExporter(ManifestBaseExporter):
    """Exports the sweep manifest to CSV, one row per executed run."""

    def get_file_name(self) -> str:
        return "sweep_manifest.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=MANIFEST_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for row in self._rows():
            # Keep each run on a single line
            if row["error"]:
                row["error"] = " | ".join(row["error"].splitlines())
            writer.writerow(row)
        return buf.getvalue()
