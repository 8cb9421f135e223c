from __future__ import annotations

from ..composition import ModuleContext
from ..contract import ModuleDescriptor
from .client import LocationClient
from .internal.location_service import LocationService

VERSION = "1.0.0"


class _LocationGateway(LocationClient):
    def __init__(self, service: LocationService) -> None:
        self.__service = service

    def healthy(self) -> bool:
        return self.__service.ready()

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(
            name="location",
            version=VERSION,
            description="Inspection locations and addresses",
        )


def build(ctx: ModuleContext) -> LocationClient:
    return _LocationGateway(LocationService(options=ctx.options))
