"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_design.workspace.template import (
    STARTER_BUTTON_CONTRACT,
    STARTER_CORE_TOKENS,
    STARTER_PLATFORM_RULES,
    STARTER_SEMANTIC_TOKENS,
    STARTER_SYSTEM,
)


def write_json(path: Path, data: Any) -> Path:
    """Write a JSON document, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workspace_root(temp_dir: Path) -> Path:
    """A complete starter workspace on disk."""
    root = temp_dir / "ws"
    write_json(root / "system.json", STARTER_SYSTEM)
    write_json(root / "tokens" / "core.json", STARTER_CORE_TOKENS)
    for theme, doc in STARTER_SEMANTIC_TOKENS.items():
        write_json(root / "tokens" / f"semantic.{theme.value}.json", doc)
    for platform, doc in STARTER_PLATFORM_RULES.items():
        write_json(root / "tokens" / f"platform.{platform.value}.json", doc)
    write_json(root / "contracts" / "Button.contract.json", STARTER_BUTTON_CONTRACT)
    return root


@pytest.fixture
def minimal_root(temp_dir: Path) -> Path:
    """The smallest useful workspace: one core token, light theme, web rules."""
    root = temp_dir / "minimal"
    write_json(root / "system.json", {"name": "minimal", "version": "1.0.0"})
    write_json(
        root / "tokens" / "core.json",
        {"tokens": {"spacing.4": {"value": 16, "category": "spacing"}}},
    )
    write_json(
        root / "tokens" / "semantic.light.json",
        {"$theme": "light", "tokens": {"space.base": {"ref": "spacing.4"}}},
    )
    write_json(
        root / "tokens" / "platform.web.json",
        {"$platform": "web", "rules": [{"category": "spacing", "transform": "px"}]},
    )
    (root / "contracts").mkdir()
    return root


@pytest.fixture
def button_contract() -> dict[str, Any]:
    """A Button contract with a required label and an enum size."""
    return {
        "name": "Button",
        "platformTargets": ["web", "rn"],
        "props": {
            "label": {"type": "string", "required": True},
            "size": {"type": "enum", "values": ["sm", "md", "lg"], "default": "md"},
            "disabled": {"type": "boolean"},
            "width": {"type": "number"},
        },
        "examples": [{"name": "Default", "props": {"label": "Save"}}],
    }
