"""Shared fixtures for generator tests.

Definition documents are written into a temporary directory so every
test gets a fresh definitions tree.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

DATA_DIR = Path(__file__).parent / "data"


# ---------------------------------------------------------------------------
# Document builders
# ---------------------------------------------------------------------------

def service(
    classes: list[str] | None = None,
    enumerations: dict[str, list[str]] | None = None,
    procedures: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build the body of one service entry."""
    return {
        "classes": {name: {} for name in classes or []},
        "enumerations": {
            name: {"values": [{"name": v} for v in values]}
            for name, values in (enumerations or {}).items()
        },
        "procedures": procedures or {},
    }


def procedure(*params: tuple[str, dict[str, Any]], returns: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a procedure entry from (name, type) pairs."""
    proc: dict[str, Any] = {
        "parameters": [{"name": name, "type": ty} for name, ty in params],
    }
    if returns is not None:
        proc["return_type"] = returns
    return proc


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def definitions_dir(tmp_path: Path) -> Path:
    """An empty definitions directory."""
    path = tmp_path / "service_definitions"
    path.mkdir()
    return path


@pytest.fixture
def write_definition(definitions_dir: Path) -> Callable[[str, Any], Path]:
    """Return a callable that writes a JSON document into the definitions dir.

    Usage in tests::

        write_definition("demo.json", {"Demo": service()})
    """
    def _write(filename: str, document: Any) -> Path:
        path = definitions_dir / filename
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def demo_document() -> dict[str, Any]:
    """The Demo service: one class, one enum, one getter."""
    return {
        "Demo": service(
            classes=["Vessel"],
            enumerations={"Mode": ["A", "B"]},
            procedures={"GetName": procedure(returns={"code": "STRING"})},
        ),
    }


@pytest.fixture
def space_center_document() -> dict[str, Any]:
    """A larger sample modelled on a real spacecraft control service."""
    with open(DATA_DIR / "space_center.json", encoding="utf-8") as f:
        return json.load(f)
