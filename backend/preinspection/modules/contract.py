from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class ModuleDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str = "1.0.0"
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)


class ModuleContract(ABC):
    """
    Public surface of a module.

    Every module publishes exactly one subclass of this (its "client"). Only
    contract objects are ever registered, resolved or injected into other
    modules.
    """

    @abstractmethod
    def healthy(self) -> bool:
        """Whether the module can currently serve requests."""

    @abstractmethod
    def describe(self) -> ModuleDescriptor:
        """Static metadata for introspection."""
