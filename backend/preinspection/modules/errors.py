from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ModuleRegistryError(Exception):
    """Base error for module registration, resolution and bootstrap.

    Bootstrap-phase errors abort process start. At request time the HTTP layer
    renders them as error envelopes.
    """

    message: str
    module: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class DuplicateModuleError(ModuleRegistryError):
    pass


@dataclass(slots=True)
class RegistryClosedError(ModuleRegistryError):
    pass


@dataclass(slots=True)
class ModuleNotFoundError(ModuleRegistryError):  # noqa: A001
    pass


@dataclass(slots=True)
class MissingDependencyError(ModuleNotFoundError):
    """A factory resolved a module that is not registered yet (forward reference or cycle)."""

    requested_by: str | None = None


@dataclass(slots=True)
class ContractViolationError(ModuleRegistryError):
    pass


@dataclass(slots=True)
class ModuleBootstrapError(ModuleRegistryError):
    cause: Exception | None = None
