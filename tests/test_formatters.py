"""Tests for formatters.py — table rendering and output dispatch."""

import json

from tagspec.formatters import (
    _sanitize_str,
    _table,
    _trunc,
    format_kinds_table,
    format_rule_detail,
    format_rules_table,
    output,
)
from tagspec.kinds import KINDS
from tagspec.parser import parse_tag


class TestTableHelpers:
    def test_trunc_short(self):
        assert _trunc("abc", 10) == "abc"

    def test_trunc_long(self):
        assert _trunc("abcdefghij", 5) == "abcd…"

    def test_trunc_empty(self):
        assert _trunc(None, 5) == ""

    def test_sanitize_strips_ansi(self):
        assert _sanitize_str("\x1b[31mred\x1b[0m") == "red"

    def test_table_layout(self):
        text = _table([("A", 4), ("B", 0)], [("x", "y")], footer="done")
        lines = text.splitlines()
        assert lines[0] == "A    B"
        assert set(lines[1]) == {"-"}
        assert lines[2] == "x    y"
        assert lines[-1] == "done"


class TestRuleFormatters:
    def test_rules_table(self):
        rules = [parse_tag("type=schedule"), parse_tag("type=sha,enable=false")]
        text = format_rules_table({"tags": [r.to_dict() for r in rules]})
        assert "pattern=nightly" in text
        assert "prefix=sha-,format=short" in text
        assert "enable=" not in text
        assert "Total: 2 tag rule(s)" in text

    def test_rules_table_enabled_column(self):
        text = format_rules_table({"tags": [parse_tag("type=sha,enable=false").to_dict()]})
        row = text.splitlines()[2]
        assert " no " in row

    def test_rule_detail(self):
        text = format_rule_detail(parse_tag("type=ref,event=pr").to_dict())
        assert text.splitlines()[0] == "Type:     ref"
        assert "prefix" in text

    def test_kinds_table(self):
        text = format_kinds_table({"kinds": [k.to_dict() for k in KINDS]})
        assert "schedule" in text
        assert "1000" in text


class TestOutput:
    def test_json_default(self, capsys):
        output({"a": 1})
        assert json.loads(capsys.readouterr().out) == {"a": 1}

    def test_table_uses_formatter(self, capsys):
        output({"a": 1}, lambda d: "TABLE", "table")
        assert capsys.readouterr().out.strip() == "TABLE"

    def test_table_without_formatter_falls_back_to_json(self, capsys):
        output({"a": 1}, None, "table")
        assert json.loads(capsys.readouterr().out) == {"a": 1}
