"""MCP server exposing the tag specification parser as tools.

Package structure:
  __init__.py  — FastMCP init, register() call, re-exports
  __main__.py  — ``python -m tagspec.mcp_server`` entry point
  _core.py     — response contract helpers
  _tools.py    — parse / build / registry tools (local only, no I/O)

Run: python -m tagspec.mcp_server
Requires: python -m pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from tagspec.mcp_server import _tools

mcp = FastMCP(
    "tagspec",
    instructions=(
        "Image tag specification tools. "
        "A spec is one line of comma-separated key=value attributes, e.g. "
        "'type=ref,event=pr' or 'type=semver,pattern={{version}}'. "
        "Kinds: schedule, semver, match, edge, ref, raw, sha. "
        "Use build_tag_set to see the final priority order of a whole input."
    ),
)

_tools.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from tagspec.mcp_server._core import (  # noqa: E402, F401
    _contract_error,
    _ensure_contract_dict,
)
from tagspec.mcp_server._tools import (  # noqa: E402, F401
    build_tag_set,
    get_kind_registry,
    parse_tag_spec,
)
