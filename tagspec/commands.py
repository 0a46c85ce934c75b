"""
Command implementations for tagspec.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Parsing and ordering live in parser.py and builder.py. These thin wrappers
collect specification lines, call the core, and dispatch to formatters.
"""

import os
import sys

from tagspec import config
from tagspec.builder import build_tag_set
from tagspec.exceptions import CliError
from tagspec.formatters import (
    format_kinds_table,
    format_rule_detail,
    format_rules_table,
    output,
)
from tagspec.kinds import KINDS
from tagspec.parser import parse_tag


def read_spec_lines(text):
    """Split a multi-line tags input into specification lines.
    Blank lines and ``#`` comments are skipped."""
    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


def _read_file(path):
    """Read a specs file; ``-`` reads stdin."""
    if path == "-":
        return sys.stdin.read()
    if not os.path.exists(path):
        raise CliError(f"[ERROR] File not found: {path}")
    with open(path, encoding="utf-8") as f:
        return f.read()


def _collect_specs(ns):
    """Specs from positional args, then --file, then the INPUT_TAGS setting."""
    specs = list(ns.specs or [])
    if getattr(ns, "file", None):
        specs.extend(read_spec_lines(_read_file(ns.file)))
    if not specs and config.INPUT_TAGS:
        specs = read_spec_lines(config.INPUT_TAGS)
    return specs


def cmd_parse(ns):
    rule = parse_tag(ns.spec)
    output(rule.to_dict(), format_rule_detail, ns.format)


def cmd_build(ns):
    rules = build_tag_set(_collect_specs(ns))
    output({"tags": [r.to_dict() for r in rules]}, format_rules_table, ns.format)


def cmd_kinds(ns):
    data = {"kinds": [k.to_dict() for k in KINDS]}
    output(data, format_kinds_table, ns.format)
