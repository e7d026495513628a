# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Abstract ports for request sources and report sinks."""
from abc import ABC, abstractmethod
from typing import Any


class MissionRequestReader(ABC):

    @abstractmethod
    def read_payload(self, path: str) -> Any:
        """Raw request payload, not yet validated."""


class ReportWriter(ABC):

    @abstractmethod
    def write_report(self, body: dict, path: str) -> None:
        ...
