"""
Composition root.

The only place where module internals are constructed. `bootstrap()` runs the
module factories in order, registers each returned contract, then closes the
registry. A factory may only depend on modules listed before it; anything
else is a `MissingDependencyError` at startup.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, TypeVar, overload

from pydantic import BaseModel, ConfigDict, Field

from ..observability.context import module_scope
from ..observability.logging import get_logger
from ..settings import Settings
from ..shared.envelope import ResponseEnvelope, success
from .contract import ModuleContract, ModuleDescriptor
from .errors import (
    ContractViolationError,
    MissingDependencyError,
    ModuleBootstrapError,
    ModuleRegistryError,
    RegistryClosedError,
)
from .registry import ModuleRegistry

log = get_logger("composition_root")

C = TypeVar("C", bound=ModuleContract)

ModuleFactory = Callable[["ModuleContext"], ModuleContract]


class HealthState(str, Enum):
    UP = "UP"
    DEGRADED = "DEGRADED"


class HealthStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: HealthState
    failing: list[str] = Field(default_factory=list)


class ModuleContext:
    """
    What a module factory gets to see while it is being built.

    `options` are handed over untouched from configuration; the composition
    root never interprets them.
    """

    def __init__(
        self,
        *,
        name: str,
        registry: ModuleRegistry,
        settings: Settings | None = None,
    ) -> None:
        self.name = name
        self.settings = settings
        self.options: dict[str, Any] = settings.options_for(name) if settings is not None else {}
        self._registry = registry
        self._dependencies: list[str] = []

    @property
    def dependencies(self) -> list[str]:
        return list(self._dependencies)

    @overload
    def resolve(self, name: str) -> ModuleContract: ...

    @overload
    def resolve(self, name: str, contract_type: type[C]) -> C: ...

    def resolve(self, name: str, contract_type: type[ModuleContract] | None = None) -> ModuleContract:
        if name not in self._registry:
            raise MissingDependencyError(
                message=(
                    f"Module '{self.name}' depends on '{name}', "
                    "which is not registered yet (forward reference or cycle)"
                ),
                module=name,
                requested_by=self.name,
            )
        contract = self._registry.resolve(name)
        if contract_type is not None and not isinstance(contract, contract_type):
            raise ContractViolationError(
                message=(
                    f"Module '{name}' does not provide {contract_type.__name__} "
                    f"(required by '{self.name}')"
                ),
                module=name,
            )
        if name not in self._dependencies:
            self._dependencies.append(name)
        return contract


class CompositionRoot:
    def __init__(self, registry: ModuleRegistry, dependencies: dict[str, tuple[str, ...]]) -> None:
        self._registry = registry
        self._dependencies = dict(dependencies)

    @property
    def registry(self) -> ModuleRegistry:
        return self._registry

    @property
    def dependencies(self) -> dict[str, tuple[str, ...]]:
        return dict(self._dependencies)

    def resolve(self, name: str) -> ModuleContract:
        return self._registry.resolve(name)

    def describe_modules(self) -> list[ModuleDescriptor]:
        return [contract.describe() for _, contract in self._registry.contracts()]

    def aggregate_health(self) -> ResponseEnvelope[HealthStatus]:
        """
        Ask every registered module whether it is healthy.

        Degradation is a reportable state: this always returns a success
        envelope. A module whose health check raises counts as unhealthy.
        """
        failing: list[str] = []
        for name, contract in self._registry.contracts():
            with module_scope(name):
                try:
                    ok = bool(contract.healthy())
                except Exception:
                    log.exception("module_health_check_failed")
                    ok = False
            if not ok:
                failing.append(name)

        if failing:
            log.warning("modules_unhealthy", failing=failing)
            return success(HealthStatus(status=HealthState.DEGRADED, failing=failing))
        return success(HealthStatus(status=HealthState.UP))


def bootstrap(
    module_factories: Iterable[tuple[str, ModuleFactory]],
    *,
    settings: Settings | None = None,
    registry: ModuleRegistry | None = None,
) -> CompositionRoot:
    """
    Build, wire and register every module, then close the registry.

    Any failure aborts the whole bootstrap; nothing is rolled back because the
    process is expected to exit.
    """
    reg = registry if registry is not None else ModuleRegistry()
    if reg.is_closed:
        raise RegistryClosedError(message="Cannot bootstrap into a closed registry")

    dependencies: dict[str, tuple[str, ...]] = {}
    for name, factory in module_factories:
        ctx = ModuleContext(name=name, registry=reg, settings=settings)
        with module_scope(name):
            try:
                contract = factory(ctx)
            except ModuleRegistryError as e:
                log.error("module_bootstrap_failed", error=str(e), error_type=type(e).__name__)
                raise
            except Exception as e:
                log.exception("module_bootstrap_failed")
                raise ModuleBootstrapError(
                    message=f"Factory for module '{name}' failed: {e}",
                    module=name,
                    cause=e,
                ) from e

        reg.register(name, contract)
        dependencies[name] = tuple(ctx.dependencies)

    reg.close()
    log.info("bootstrap_complete", modules=reg.names(), dependencies={k: list(v) for k, v in dependencies.items()})
    return CompositionRoot(reg, dependencies)
