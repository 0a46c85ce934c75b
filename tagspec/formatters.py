"""Output formatting for tag rules (JSON and plain-text tables, stdlib only)."""

import json
import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _table(columns, rows, footer=None):
    """Build a formatted table string.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns.
    footer: optional footer line."""
    parts = []
    for i, (name, width) in enumerate(columns):
        if i == len(columns) - 1:
            parts.append(name)
        else:
            parts.append(f"{name:<{width}}")
    header = " ".join(parts)
    sep = "-" * max(len(header), 60)
    lines = [header, sep]
    for row in rows:
        parts = []
        for i, val in enumerate(row):
            safe = _sanitize_str(val) if isinstance(val, str) else str(val)
            if i == len(columns) - 1:
                parts.append(safe)
            else:
                parts.append(f"{safe:<{columns[i][1]}}")
        lines.append(" ".join(parts))
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)


def output(data, formatter=None, fmt="json"):
    """Output data in requested format."""
    if fmt == "table" and formatter:
        print(formatter(data))
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))


def _attrs_text(attrs):
    return ",".join(f"{k}={v}" for k, v in attrs.items() if k not in ("enable", "priority"))


def format_rules_table(data):
    """Table for ``{"tags": [rule dicts]}``."""
    rows = []
    for i, rule in enumerate(data.get("tags", []), 1):
        attrs = rule["attrs"]
        rows.append(
            (
                str(i),
                rule["type"],
                attrs.get("priority", ""),
                "yes" if attrs.get("enable") == "true" else "no",
                _trunc(_attrs_text(attrs), 80),
            )
        )
    return _table(
        [("#", 3), ("Type", 9), ("Priority", 9), ("Enabled", 8), ("Attributes", 0)],
        rows,
        footer=f"Total: {len(rows)} tag rule(s)",
    )


def format_rule_detail(rule):
    """Key/value listing for a single rule dict."""
    lines = [f"Type:     {rule['type']}"]
    for key, value in rule["attrs"].items():
        lines.append(f"  {key:<10} {_sanitize_str(value) if value else '(empty)'}")
    return "\n".join(lines)


def format_kinds_table(data):
    rows = [
        (k["name"], k["default_priority"], ",".join(k["requires"]) or "-", k["description"])
        for k in data.get("kinds", [])
    ]
    return _table([("Kind", 9), ("Priority", 9), ("Requires", 9), ("Description", 0)], rows)
