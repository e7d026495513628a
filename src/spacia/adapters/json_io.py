# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON file I/O adapter.

Reads planner request payloads and writes report bodies.
"""
import json
from typing import Any

from spacia.ports import MissionRequestReader, ReportWriter


class JsonMissionRequestReader(MissionRequestReader):
    """Reads request payloads from JSON files."""

    def read_payload(self, path: str) -> Any:
        with open(path, encoding='utf-8') as f:
            return json.load(f)


class JsonReportWriter(ReportWriter):
    """Writes report bodies (or lists of them) to JSON files."""

    def write_report(self, body: dict | list, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(body, f, indent=2, ensure_ascii=False)
            f.write("\n")


def dumps_report(body: dict | list) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)
