from __future__ import annotations

from ...shared.envelope import ResponseEnvelope
from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from ..location.client import LocationClient
from ..pipeline.client import PipelineClient
from .client import AppointmentClient
from .internal.appointment_service import AppointmentService

VERSION = "1.0.0"


class _AppointmentGateway(AppointmentClient):
    def __init__(self, service: AppointmentService, dependencies: list[str]) -> None:
        self.__service = service
        self.__dependencies = list(dependencies)

    def scheduling_available(self) -> ResponseEnvelope[dict[str, bool]]:
        return self.__service.scheduling_available()

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(
            name="appointment",
            version=VERSION,
            description="Inspection appointment slots",
            dependencies=self.__dependencies,
        )


def build(ctx: ModuleContext) -> AppointmentClient:
    service = AppointmentService(
        location=ctx.resolve("location", LocationClient),
        pipeline=ctx.resolve("pipeline", PipelineClient),
        options=ctx.options,
    )
    return _AppointmentGateway(service, ctx.dependencies)
