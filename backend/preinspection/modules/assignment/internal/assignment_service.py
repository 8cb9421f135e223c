from __future__ import annotations

from typing import Any

from ...location.client import LocationClient


class AssignmentService:
    """
    Holds the location contract injected at bootstrap. Addresses are only ever
    checked through that contract.
    """

    def __init__(self, *, location: LocationClient, options: dict[str, Any]) -> None:
        self._location = location
        self._force_unhealthy = bool(options.get("force_unhealthy"))

    def location_available(self) -> bool:
        return bool(self._location.healthy())

    def ready(self) -> bool:
        return not self._force_unhealthy
