from __future__ import annotations

from datetime import datetime

from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from .client import CoreClient
from .internal.clock_service import ClockService

VERSION = "1.0.0"


class _CoreGateway(CoreClient):
    def __init__(self, service: ClockService) -> None:
        self.__service = service

    def now(self) -> datetime:
        return self.__service.now()

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(name="core", version=VERSION, description="Shared utilities")


def build(ctx: ModuleContext) -> CoreClient:
    return _CoreGateway(ClockService(options=ctx.options))
