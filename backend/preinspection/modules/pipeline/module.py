from __future__ import annotations

from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from ..assignment.client import AssignmentClient
from .client import PipelineClient
from .internal.pipeline_service import PipelineService

VERSION = "1.0.0"


class _PipelineGateway(PipelineClient):
    def __init__(self, service: PipelineService, dependencies: list[str]) -> None:
        self.__service = service
        self.__dependencies = list(dependencies)

    def assignment_available(self) -> bool:
        return self.__service.assignment_available()

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(
            name="pipeline",
            version=VERSION,
            description="Lead progression through inspection stages",
            dependencies=self.__dependencies,
        )


def build(ctx: ModuleContext) -> PipelineClient:
    assignment = ctx.resolve("assignment", AssignmentClient)
    return _PipelineGateway(PipelineService(assignment=assignment, options=ctx.options), ctx.dependencies)
