from __future__ import annotations

from typing import Any

from ...assignment.client import AssignmentClient


class PipelineService:
    def __init__(self, *, assignment: AssignmentClient, options: dict[str, Any]) -> None:
        self._assignment = assignment
        self._force_unhealthy = bool(options.get("force_unhealthy"))

    def assignment_available(self) -> bool:
        return bool(self._assignment.healthy())

    def ready(self) -> bool:
        return not self._force_unhealthy
