"""Fixtures for CLI command tests: a configured workspace tree."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

DEFINITIONS = [
    {"name": "python", "has_any_file": ["pyproject.toml"], "default_layout": "python"},
    {"name": "rust", "has_any_file": ["Cargo.toml"]},
]
LAYOUTS = [
    {"name": "editor", "commands": ["nvim ."]},
    {"name": "python", "inherits": ["editor"], "commands": ["source .venv/bin/activate"]},
    {"name": "build", "commands": ["make"]},
]


@pytest.fixture
def configured_tree(
    make_tree: Callable[..., Path],
    write_config: Callable[[dict[str, Any]], Path],
) -> Path:
    """A small tree of projects plus a wsctl.yaml that searches it."""
    tree = make_tree(
        "dev/api/pyproject.toml",
        "dev/engine/Cargo.toml",
        "misc/notes.txt",
    )
    write_config(
        {
            "search": {"paths": [str(tree)]},
            "workspace_definitions": DEFINITIONS,
            "layouts": LAYOUTS,
        }
    )
    return tree
