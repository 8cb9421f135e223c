from __future__ import annotations

from typing import Any


class LocationService:
    def __init__(self, *, options: dict[str, Any]) -> None:
        self._options = dict(options)

    def ready(self) -> bool:
        return not bool(self._options.get("force_unhealthy"))
