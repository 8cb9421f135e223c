"""
Module boundary audit.

Lists every import of a module's `internal` package from outside that module.
Exits non-zero when violations are found so it can gate CI.

Usage (from `backend/`):
    python scripts/module_boundary_audit.py [package_dir]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from preinspection.modules.boundaries import check_module_boundaries  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Audit cross-module imports of internal packages.")
    parser.add_argument(
        "package_dir",
        nargs="?",
        default=str(BACKEND_DIR / "preinspection"),
        help="package root to scan (default: backend/preinspection)",
    )
    args = parser.parse_args(argv)

    violations = check_module_boundaries(Path(args.package_dir))

    print("=== Module boundary audit ===")
    print(f"package_dir: {args.package_dir}")
    print(f"violations: {len(violations)}")
    for v in violations:
        print(f"- {v}")
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
