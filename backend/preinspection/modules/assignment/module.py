from __future__ import annotations

from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from ..location.client import LocationClient
from .client import AssignmentClient
from .internal.assignment_service import AssignmentService

VERSION = "1.0.0"


class _AssignmentGateway(AssignmentClient):
    def __init__(self, service: AssignmentService, dependencies: list[str]) -> None:
        self.__service = service
        self.__dependencies = list(dependencies)

    def location_available(self) -> bool:
        return self.__service.location_available()

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(
            name="assignment",
            version=VERSION,
            description="Allocation of inspections to inspectors",
            dependencies=self.__dependencies,
        )


def build(ctx: ModuleContext) -> AssignmentClient:
    location = ctx.resolve("location", LocationClient)
    service = AssignmentService(location=location, options=ctx.options)
    return _AssignmentGateway(service, ctx.dependencies)
