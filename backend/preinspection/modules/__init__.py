"""
Modular monolith package.

Each business domain lives in its own sub-package (`modules/<name>/`) with:
- `client.py`: the public contract other modules and routers may depend on
- `internal/`: the private implementation; only the module's own `module.py`
  imports it
- `module.py`: the factory the composition root calls at startup

Cross-module access always goes through a resolved contract, never through
another module's `internal` package.
"""
