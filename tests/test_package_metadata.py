"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import indexed_astar

ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "indexed-astar"
    assert poetry["version"] == indexed_astar.__version__
    assert poetry["scripts"]["indexed-astar"] == "indexed_astar.__main__:main"

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "networkx", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"


def test_test_extra_lists_pytest() -> None:
    poetry = _load_pyproject()["tool"]["poetry"]
    assert "pytest" in poetry["extras"]["test"]
    assert poetry["dependencies"]["pytest"]["optional"] is True
