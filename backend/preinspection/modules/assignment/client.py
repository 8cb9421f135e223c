from __future__ import annotations

from abc import abstractmethod

from ..contract import ModuleContract


class AssignmentClient(ModuleContract):
    @abstractmethod
    def location_available(self) -> bool:
        """Whether the location module this module relies on is currently usable."""
