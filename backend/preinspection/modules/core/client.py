from __future__ import annotations

from abc import abstractmethod
from datetime import datetime

from ..contract import ModuleContract


class CoreClient(ModuleContract):
    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware UTC."""
