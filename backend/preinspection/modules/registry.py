"""
Module registry and visibility gate.

The registry maps module names to their public contracts. It is append-only
while open (during bootstrap) and read-only once closed. After `close()` the
mapping is never mutated again, so `resolve` takes no lock and is safe to call
from any number of concurrent request handlers.

The registry only accepts `ModuleContract` instances whose concrete class is
declared outside any `internal` package. Internal implementations therefore
never enter the registry and can never be handed to another module.
"""

from __future__ import annotations

from typing import Iterator

from ..observability.logging import get_logger
from .contract import ModuleContract
from .errors import (
    ContractViolationError,
    DuplicateModuleError,
    ModuleNotFoundError,
    RegistryClosedError,
)

log = get_logger("module_registry")

INTERNAL_PACKAGE = "internal"


def _normalize_name(name: object) -> str:
    if not isinstance(name, str) or not name or name != name.strip():
        raise ContractViolationError(
            message=f"Invalid module name: {name!r}",
            module=str(name),
        )
    return name


def _declared_in_internal_package(cls: type) -> bool:
    return INTERNAL_PACKAGE in str(getattr(cls, "__module__", "") or "").split(".")


def _check_contract(name: str, contract: object) -> ModuleContract:
    if not isinstance(contract, ModuleContract):
        raise ContractViolationError(
            message=f"Module '{name}' must register a ModuleContract, got {type(contract).__name__}",
            module=name,
        )
    if _declared_in_internal_package(type(contract)):
        raise ContractViolationError(
            message=(
                f"Module '{name}' tried to register internal implementation "
                f"{type(contract).__module__}.{type(contract).__qualname__}"
            ),
            module=name,
        )
    return contract


class ModuleRegistry:
    def __init__(self) -> None:
        self._contracts: dict[str, ModuleContract] = {}
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def register(self, name: str, contract: ModuleContract) -> None:
        if self._closed:
            raise RegistryClosedError(
                message=f"Registry is closed; cannot register module '{name}'",
                module=str(name),
            )
        key = _normalize_name(name)
        if key in self._contracts:
            raise DuplicateModuleError(
                message=f"Module already registered: {key}",
                module=key,
            )
        self._contracts[key] = _check_contract(key, contract)
        log.info("module_registered", module=key, contract=type(contract).__name__)

    def resolve(self, name: str) -> ModuleContract:
        try:
            return self._contracts[name]
        except (KeyError, TypeError):
            raise ModuleNotFoundError(
                message=f"Module not registered: {name}",
                module=str(name),
            ) from None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        log.info("module_registry_closed", module_count=len(self._contracts))

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._contracts)

    def contracts(self) -> list[tuple[str, ModuleContract]]:
        return list(self._contracts.items())

    def __contains__(self, name: object) -> bool:
        return name in self._contracts

    def __len__(self) -> int:
        return len(self._contracts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
