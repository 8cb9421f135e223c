from __future__ import annotations

from abc import abstractmethod

from ...shared.envelope import ResponseEnvelope
from ..contract import ModuleContract


class AppointmentClient(ModuleContract):
    @abstractmethod
    def scheduling_available(self) -> ResponseEnvelope[dict[str, bool]]:
        """Availability of every module appointment scheduling relies on, keyed by module name."""
