"""
JSON payloads shared by the MCP tools.

Every tool answers with a JSON string whose "status" is either
"success" or "error".
"""

from __future__ import annotations

import json
from typing import Any

from chuk_mcp_design.errors import WorkspaceError


def success(**fields: Any) -> str:
    return json.dumps({"status": "success", **fields})


def failure(error: WorkspaceError) -> str:
    """Error payload for a failed workspace operation."""
    payload: dict[str, Any] = {
        "status": "error",
        "code": error.code.value,
        "message": error.message,
        "path": error.path,
    }
    if error.details:
        payload["details"] = error.details
    return json.dumps(payload)


def bad_argument(message: str, path: str | None = None) -> str:
    """Error payload for an argument outside its closed set of values."""
    return json.dumps(
        {"status": "error", "code": "INVALID_ARGUMENT", "message": message, "path": path}
    )


def unexpected(e: Exception) -> str:
    return json.dumps({"status": "error", "message": str(e)})
