from __future__ import annotations

import pytest
import uvicorn

import preinspection.__main__ as entrypoint
import preinspection.main as app_main
from preinspection.modules.assignment import build as build_assignment
from preinspection.modules.composition import ModuleContext
from preinspection.modules.contract import ModuleContract
from preinspection.modules.location import build as build_location
from preinspection.settings import Settings


@pytest.fixture
def server_calls(monkeypatch) -> list[dict]:
    calls: list[dict] = []

    def fake_run(app, **kwargs):
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setattr(entrypoint, "get_settings", lambda: Settings(ACCESS_LOG_ENABLED=False, PORT=9090))
    return calls


def test_forward_dependency_exits_1_without_serving(monkeypatch, server_calls):
    monkeypatch.setattr(
        app_main,
        "default_module_factories",
        lambda: [("assignment", build_assignment), ("location", build_location)],
    )
    assert entrypoint.main() == 1
    assert server_calls == []


def test_crashing_factory_exits_1_without_serving(monkeypatch, server_calls):
    def broken(ctx: ModuleContext) -> ModuleContract:
        raise RuntimeError("location provider unreachable")

    monkeypatch.setattr(app_main, "default_module_factories", lambda: [("location", broken)])
    assert entrypoint.main() == 1
    assert server_calls == []


def test_healthy_module_graph_starts_the_server(server_calls):
    assert entrypoint.main() == 0
    assert len(server_calls) == 1
    call = server_calls[0]
    assert call["port"] == 9090
    assert call["host"] == "0.0.0.0"
    assert call["app"].state.composition.registry.names()[0] == "core"
