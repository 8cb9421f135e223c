from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable


class ClockService:
    def __init__(self, *, options: dict[str, Any], clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._force_unhealthy = bool(options.get("force_unhealthy"))

    def now(self) -> datetime:
        ts = self._clock()
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(timezone.utc)

    def ready(self) -> bool:
        return not self._force_unhealthy
