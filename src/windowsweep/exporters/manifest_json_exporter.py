# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for the sweep manifest."""

import orjson

from windowsweep.exporters.manifest_base_exporter import ManifestBaseExporter


class ManifestJsonExporter(ManifestBaseExporter):
    """Exports the sweep manifest to JSON format.

    Output structure:
    {
        "parameters": {"rate": 100.0, "duration": 10.0, "workers": 4},
        "num_runs": 108,
        "num_successful_runs": 107,
        "failed_runs": ["window_3_faster_rank_size_1000_slices_100"],
        "runs": [{...}, ...]
    }
    """

    def get_file_name(self) -> str:
        return "sweep_manifest.json"

    def _generate_content(self) -> str:
        output = {
            "parameters": self._config.parameters.model_dump(mode="json"),
            "num_runs": len(self._results),
            "num_successful_runs": sum(1 for r in self._results if r.success),
            "failed_runs": [r.label for r in self._results if not r.success],
            "runs": self._rows(),
        }
        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8")
