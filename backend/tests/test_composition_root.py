from __future__ import annotations

from datetime import datetime, timezone

import pytest

from preinspection.modules.assignment import AssignmentClient
from preinspection.modules.assignment import build as build_assignment
from preinspection.modules.attendance import AttendanceClient
from preinspection.modules.appointment import AppointmentClient
from preinspection.modules.catalog import default_module_factories
from preinspection.modules.composition import HealthState, ModuleContext, bootstrap
from preinspection.modules.contract import ModuleContract, ModuleDescriptor
from preinspection.modules.errors import (
    ContractViolationError,
    DuplicateModuleError,
    MissingDependencyError,
    ModuleBootstrapError,
    ModuleNotFoundError,
    RegistryClosedError,
)
from preinspection.modules.location import LocationClient
from preinspection.modules.location import build as build_location
from preinspection.modules.registry import ModuleRegistry
from preinspection.settings import Settings


class _StubContract(ModuleContract):
    def __init__(self, name: str, ok: bool = True):
        self.name = name
        self.ok = ok
        self.peer: ModuleContract | None = None

    def healthy(self) -> bool:
        return self.ok

    def describe(self) -> ModuleDescriptor:
        return ModuleDescriptor(name=self.name)


def _stub(name: str, *, ok: bool = True, needs: str | None = None):
    def factory(ctx: ModuleContext) -> ModuleContract:
        c = _StubContract(name, ok=ok)
        if needs:
            c.peer = ctx.resolve(needs)
        return c

    return factory


def _settings(**module_options) -> Settings:
    return Settings(MODULE_OPTIONS=module_options)


def test_bootstrap_in_dependency_order_succeeds():
    root = bootstrap([("a", _stub("a")), ("b", _stub("b", needs="a"))])
    b = root.resolve("b")
    assert isinstance(b, _StubContract)
    assert b.peer is root.resolve("a")
    assert root.registry.is_closed
    assert root.dependencies == {"a": (), "b": ("a",)}


def test_forward_reference_is_missing_dependency():
    with pytest.raises(MissingDependencyError) as ei:
        bootstrap([("b", _stub("b", needs="a")), ("a", _stub("a"))])
    assert ei.value.module == "a"
    assert ei.value.requested_by == "b"
    # Still a "not found" error for callers that only care about that.
    assert isinstance(ei.value, ModuleNotFoundError)


def test_self_reference_is_missing_dependency():
    with pytest.raises(MissingDependencyError):
        bootstrap([("a", _stub("a", needs="a"))])


def test_duplicate_names_abort_bootstrap():
    with pytest.raises(DuplicateModuleError):
        bootstrap([("a", _stub("a")), ("a", _stub("a"))])


def test_failing_factory_aborts_bootstrap_with_cause():
    def broken(ctx: ModuleContext) -> ModuleContract:
        raise RuntimeError("db unreachable")

    with pytest.raises(ModuleBootstrapError) as ei:
        bootstrap([("a", _stub("a")), ("b", broken)])
    assert ei.value.module == "b"
    assert isinstance(ei.value.cause, RuntimeError)
    assert "db unreachable" in str(ei.value)


def test_factory_must_return_a_contract():
    with pytest.raises(ContractViolationError):
        bootstrap([("a", lambda ctx: {"not": "a contract"})])  # type: ignore[arg-type,return-value]


def test_resolve_with_wrong_contract_type_is_rejected():
    def wants_location(ctx: ModuleContext) -> ModuleContract:
        ctx.resolve("location", LocationClient)
        return _StubContract("x")

    with pytest.raises(ContractViolationError):
        bootstrap([("location", _stub("location")), ("x", wants_location)])


def test_bootstrap_into_closed_registry_fails():
    reg = ModuleRegistry()
    reg.close()
    with pytest.raises(RegistryClosedError):
        bootstrap([("a", _stub("a"))], registry=reg)


def test_registry_is_closed_after_bootstrap():
    root = bootstrap([("a", _stub("a"))])
    with pytest.raises(RegistryClosedError):
        root.registry.register("late", _StubContract("late"))
    assert root.registry.names() == ["a"]


def test_factories_receive_their_own_options_only():
    seen: dict[str, dict] = {}

    def capture(name: str):
        def factory(ctx: ModuleContext) -> ModuleContract:
            seen[name] = ctx.options
            return _StubContract(name)

        return factory

    bootstrap(
        [("location", capture("location")), ("core", capture("core"))],
        settings=_settings(location={"provider": "maps", "timeout": 3}),
    )
    assert seen == {"location": {"provider": "maps", "timeout": 3}, "core": {}}


def test_aggregate_health_up_when_all_healthy():
    root = bootstrap([("assignment", _stub("assignment")), ("location", _stub("location"))])
    env = root.aggregate_health()
    assert env.success is True
    assert env.data.status == HealthState.UP
    assert env.data.failing == []


def test_aggregate_health_degraded_names_exactly_the_unhealthy_modules():
    root = bootstrap([("assignment", _stub("assignment")), ("location", _stub("location", ok=False))])
    env = root.aggregate_health()
    assert env.success is True
    assert env.to_dict()["data"] == {"status": "DEGRADED", "failing": ["location"]}


def test_health_check_that_raises_counts_as_unhealthy():
    class _Exploding(_StubContract):
        def healthy(self) -> bool:
            raise RuntimeError("boom")

    root = bootstrap([("core", _stub("core")), ("pipeline", lambda ctx: _Exploding("pipeline"))])
    env = root.aggregate_health()
    assert env.success is True
    assert env.data.status == HealthState.DEGRADED
    assert env.data.failing == ["pipeline"]


def test_end_to_end_core_location_assignment():
    root = bootstrap(
        [
            ("core", _stub("core")),
            ("location", build_location),
            ("assignment", build_assignment),
        ]
    )
    assignment = root.resolve("assignment")
    assert isinstance(assignment, AssignmentClient)
    assert assignment.location_available() is True
    assert assignment.describe().dependencies == ["location"]
    assert root.aggregate_health().data.status == HealthState.UP


def test_assignment_observes_location_through_its_contract():
    root = bootstrap(
        [("location", build_location), ("assignment", build_assignment)],
        settings=_settings(location={"force_unhealthy": True}),
    )
    assert root.resolve("assignment").location_available() is False
    assert root.aggregate_health().data.failing == ["location"]


def test_assignment_without_location_fails_bootstrap():
    with pytest.raises(MissingDependencyError) as ei:
        bootstrap([("assignment", build_assignment), ("location", build_location)])
    assert ei.value.requested_by == "assignment"


def test_default_catalog_bootstraps_every_module():
    root = bootstrap(default_module_factories(), settings=_settings())
    assert root.registry.names() == [
        "core",
        "location",
        "assignment",
        "pipeline",
        "attendance",
        "appointment",
    ]
    assert root.dependencies == {
        "core": (),
        "location": (),
        "assignment": ("location",),
        "pipeline": ("assignment",),
        "attendance": ("core",),
        "appointment": ("location", "pipeline"),
    }
    assert root.aggregate_health().data.status == HealthState.UP
    assert [d.name for d in root.describe_modules()] == root.registry.names()


def test_attendance_reads_time_from_core():
    root = bootstrap(default_module_factories(), settings=_settings())
    attendance = root.resolve("attendance")
    assert isinstance(attendance, AttendanceClient)
    env = attendance.current_time()
    assert env.success is True
    assert isinstance(env.data, datetime)
    assert env.data.tzinfo == timezone.utc


def test_attendance_reports_error_envelope_when_core_is_down():
    root = bootstrap(default_module_factories(), settings=_settings(core={"force_unhealthy": True}))
    env = root.resolve("attendance").current_time()
    assert env.success is False
    assert "core" in env.message
    assert env.data is None


def test_appointment_reports_dependency_availability():
    root = bootstrap(default_module_factories(), settings=_settings(pipeline={"force_unhealthy": True}))
    appointment = root.resolve("appointment")
    assert isinstance(appointment, AppointmentClient)
    env = appointment.scheduling_available()
    assert env.success is True
    assert env.data == {"location": True, "pipeline": False}
    assert root.aggregate_health().data.failing == ["pipeline"]


def test_resolved_contracts_never_expose_internal_types():
    root = bootstrap(default_module_factories(), settings=_settings())
    for name, contract in root.registry.contracts():
        assert "internal" not in type(contract).__module__.split("."), name
