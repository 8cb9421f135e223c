from __future__ import annotations

from typing import Any

from ....shared.envelope import ResponseEnvelope, success
from ...location.client import LocationClient
from ...pipeline.client import PipelineClient


class AppointmentService:
    def __init__(
        self,
        *,
        location: LocationClient,
        pipeline: PipelineClient,
        options: dict[str, Any],
    ) -> None:
        self._location = location
        self._pipeline = pipeline
        self._force_unhealthy = bool(options.get("force_unhealthy"))

    def scheduling_available(self) -> ResponseEnvelope[dict[str, bool]]:
        return success(
            {
                "location": bool(self._location.healthy()),
                "pipeline": bool(self._pipeline.healthy()),
            }
        )

    def ready(self) -> bool:
        return not self._force_unhealthy
