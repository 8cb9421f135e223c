from __future__ import annotations

from ..contract import ModuleContract


class LocationClient(ModuleContract):
    """Public contract of the location module. Other modules depend on this type only."""
