"""Checks on what the package imports."""

from __future__ import annotations

import ast
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent / "cicd_demo"

# Distributions the package may import, keyed by top-level module name.
DECLARED = {"cicd_demo", "fastapi", "uvicorn", "pydantic", "pydantic_settings", "jinja2"}


def _top_level_imports(path: Path) -> set[str]:
    names: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            names.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            names.add(node.module.split(".")[0])
    return names


def test_third_party_imports_are_declared() -> None:
    stdlib = set(sys.stdlib_module_names)
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        undeclared = _top_level_imports(path) - stdlib - DECLARED - {"__future__"}
        assert not undeclared, f"{path.relative_to(PACKAGE_ROOT)} imports {sorted(undeclared)}"
