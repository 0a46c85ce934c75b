"""Tag specification tools (3 tools, no I/O)."""

from __future__ import annotations

from tagspec import builder, parser
from tagspec.exceptions import TagSpecError
from tagspec.kinds import ENABLE_VALUES, KINDS, REF_EVENTS, SHA_FORMATS
from tagspec.mcp_server._core import _contract_error, _ensure_contract_dict


def parse_tag_spec(spec: str) -> dict:
    """Parse one tag specification line into its type and defaulted attributes.

    Args:
        spec: One line, e.g. 'type=match,pattern=v(\\d.\\d),group=1'.
    """
    try:
        rule = parser.parse_tag(spec)
    except TagSpecError as e:
        return _contract_error(str(e), e.error_type)
    return _ensure_contract_dict({"tag": rule.to_dict(), "spec": str(rule)})


def build_tag_set(specs: list[str] | None = None) -> dict:
    """Parse a list of tag specifications and return them by descending priority.

    An empty list yields the default set (schedule, ref branch/tag/pr).
    The first invalid spec fails the whole call.

    Args:
        specs: Specification lines, one per tag rule.
    """
    try:
        rules = builder.build_tag_set(specs or [])
    except TagSpecError as e:
        return _contract_error(str(e), e.error_type)
    return _ensure_contract_dict(
        {
            "tags": [r.to_dict() for r in rules],
            "specs": [str(r) for r in rules],
        }
    )


def get_kind_registry() -> dict:
    """Get the tag kinds with their default priorities and required attributes."""
    return _ensure_contract_dict(
        {
            "kinds": [k.to_dict() for k in KINDS],
            "ref_events": list(REF_EVENTS),
            "sha_formats": list(SHA_FORMATS),
            "enable_values": list(ENABLE_VALUES),
        }
    )


def register(mcp):
    """Register all tools with the FastMCP instance."""
    mcp.tool()(parse_tag_spec)
    mcp.tool()(build_tag_set)
    mcp.tool()(get_kind_registry)
