"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_runtime_dependencies() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"]).lower()
    for name in ("pydantic", "pyyaml", "typer"):
        assert name in deps


def test_dev_extra() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject()["project"]["scripts"]
    assert scripts["combinable"] == "combinable.cli:app"


def test_import_smoke() -> None:
    importlib.import_module("combinable")
    importlib.import_module("combinable.cli")


def test_long_description_is_readme() -> None:
    project = _load_pyproject()["project"]
    assert project["readme"] == "README.md"
    assert (Path(__file__).resolve().parents[1] / "README.md").is_file()
