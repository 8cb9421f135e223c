from __future__ import annotations

from abc import abstractmethod

from ..contract import ModuleContract


class PipelineClient(ModuleContract):
    @abstractmethod
    def assignment_available(self) -> bool:
        pass
