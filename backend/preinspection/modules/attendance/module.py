from __future__ import annotations

from datetime import datetime

from ...shared.envelope import ResponseEnvelope
from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from ..core.client import CoreClient
from .client import AttendanceClient
from .internal.attendance_service import AttendanceService

VERSION = "1.0.0"


class _AttendanceGateway(AttendanceClient):
    def __init__(self, service: AttendanceService, dependencies: list[str]) -> None:
        self.__service = service
        self.__dependencies = list(dependencies)

    def current_time(self) -> ResponseEnvelope[datetime]:
        return self.__service.current_time()

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(
            name="attendance",
            version=VERSION,
            description="Inspector check-in and check-out",
            dependencies=self.__dependencies,
        )


def build(ctx: ModuleContext) -> AttendanceClient:
    core = ctx.resolve("core", CoreClient)
    return _AttendanceGateway(AttendanceService(core=core, options=ctx.options), ctx.dependencies)
