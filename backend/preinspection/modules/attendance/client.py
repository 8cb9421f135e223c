from __future__ import annotations

from abc import abstractmethod
from datetime import datetime

from ...shared.envelope import ResponseEnvelope
from ..contract import ModuleContract


class AttendanceClient(ModuleContract):
    @abstractmethod
    def current_time(self) -> ResponseEnvelope[datetime]:
        """
        Time attendance records are stamped with.

        Returns an error envelope when the core clock is unavailable.
        """
