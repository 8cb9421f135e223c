"""
Static module-boundary audit.

Walks the package with `ast` and reports every import of a module's
`internal` package from outside that module. Dynamic imports
(`importlib.import_module`) are not seen.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path

from .registry import INTERNAL_PACKAGE


@dataclass(frozen=True)
class BoundaryViolation:
    path: str
    line: int
    importer: str
    imported: str

    def __str__(self) -> str:
        return f"{self.path}:{self.line}: {self.importer} imports {self.imported}"


def _iter_py_files(root: Path) -> list[Path]:
    out: list[Path] = []
    for p in sorted(root.rglob("*.py")):
        if "__pycache__" in p.parts:
            continue
        out.append(p)
    return out


def _module_name_from_path(package_root: Path, file_path: Path) -> str:
    rel = file_path.relative_to(package_root)
    if rel.name == "__init__.py":
        parts = rel.parent.parts
    else:
        parts = (*rel.parent.parts, rel.stem)
    return ".".join((package_root.name, *parts))


def _resolve_relative(within_module: str, *, is_package: bool, level: int, mod: str) -> str:
    # PEP 328: level=1 is the current package, level=2 its parent, etc.
    pkg_parts = within_module.split(".") if is_package else within_module.split(".")[:-1]
    ascend = max(0, level - 1)
    prefix = pkg_parts[: len(pkg_parts) - ascend] if ascend else pkg_parts
    return ".".join([*prefix, mod]) if mod else ".".join(prefix)


def _imported_names(tree: ast.AST, *, within_module: str, is_package: bool) -> list[tuple[int, str]]:
    out: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                out.append((node.lineno, str(alias.name or "")))
        elif isinstance(node, ast.ImportFrom):
            mod = str(node.module or "")
            level = int(node.level or 0)
            base = (
                _resolve_relative(within_module, is_package=is_package, level=level, mod=mod)
                if level
                else mod
            )
            out.append((node.lineno, base))
            # `from pkg.modules.x import internal` imports the sub-package itself.
            for alias in node.names:
                nm = str(alias.name or "")
                if nm and nm != "*":
                    out.append((node.lineno, f"{base}.{nm}"))
    return out


def _owning_module(package: str, dotted: str) -> str | None:
    parts = dotted.split(".")
    if len(parts) >= 3 and parts[0] == package and parts[1] == "modules":
        return parts[2]
    return None


def _internal_target(package: str, dotted: str) -> str | None:
    parts = dotted.split(".")
    if len(parts) >= 4 and parts[0] == package and parts[1] == "modules" and parts[3] == INTERNAL_PACKAGE:
        return parts[2]
    return None


def check_module_boundaries(package_dir: Path | str | None = None) -> list[BoundaryViolation]:
    """
    Return every cross-module import of an `internal` package under `package_dir`.

    Defaults to the installed `preinspection` package.
    """
    root = Path(package_dir) if package_dir is not None else Path(__file__).resolve().parents[1]
    package = root.name

    violations: list[BoundaryViolation] = []
    seen: set[tuple[str, int, str]] = set()
    for fp in _iter_py_files(root):
        importer = _module_name_from_path(root, fp)
        tree = ast.parse(fp.read_text(encoding="utf-8"), filename=str(fp))
        owner = _owning_module(package, importer)
        for line, imported in _imported_names(tree, within_module=importer, is_package=fp.name == "__init__.py"):
            target = _internal_target(package, imported)
            if target is None or target == owner:
                continue
            key = (str(fp), line, f"{package}.modules.{target}.{INTERNAL_PACKAGE}")
            if key in seen:
                continue
            seen.add(key)
            violations.append(
                BoundaryViolation(path=str(fp), line=line, importer=importer, imported=imported)
            )
    return violations
