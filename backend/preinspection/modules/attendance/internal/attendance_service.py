from __future__ import annotations

from datetime import datetime
from typing import Any

from ....shared.envelope import ResponseEnvelope, error, success
from ...core.client import CoreClient


class AttendanceService:
    def __init__(self, *, core: CoreClient, options: dict[str, Any]) -> None:
        self._core = core
        self._force_unhealthy = bool(options.get("force_unhealthy"))

    def current_time(self) -> ResponseEnvelope[datetime]:
        if not self._core.healthy():
            return error("Clock unavailable: core module is unhealthy")
        return success(self._core.now())

    def ready(self) -> bool:
        return not self._force_unhealthy
