"""Tests for builder.py — defaults, priority ordering, trace output."""

import pytest

from tagspec import config
from tagspec.builder import DEFAULT_TAG_SPECS, build_tag_set, sort_rules
from tagspec.exceptions import InvalidAttributeValueError, MissingAttributeError, UnknownTypeError
from tagspec.parser import parse_tag


def _specs(rules):
    return [str(r) for r in rules]


class TestDefaults:
    def test_empty_input_uses_defaults(self):
        rules = build_tag_set([])
        assert [r.kind for r in rules] == ["schedule", "ref", "ref", "ref"]
        assert [r.attrs.get("event") for r in rules[1:]] == ["branch", "tag", "pr"]

    def test_defaults_match_parsed_default_specs(self):
        expected = [parse_tag(line).to_dict() for line in DEFAULT_TAG_SPECS]
        assert [r.to_dict() for r in build_tag_set([])] == expected

    def test_default_priorities(self):
        assert [r.attrs["priority"] for r in build_tag_set([])] == ["1000", "600", "600", "600"]


class TestOrdering:
    def test_sorted_by_kind_priority(self):
        rules = build_tag_set(
            [
                "type=sha",
                "type=raw,value=x",
                "type=schedule",
                "type=semver,pattern=p",
                "type=edge",
                "type=match,pattern=m",
                "type=ref,event=tag",
            ]
        )
        assert [r.kind for r in rules] == [
            "schedule",
            "semver",
            "match",
            "edge",
            "ref",
            "raw",
            "sha",
        ]

    def test_numeric_not_lexicographic(self):
        rules = build_tag_set(["type=semver,pattern=p", "type=schedule"])
        assert [r.kind for r in rules] == ["schedule", "semver"]

    def test_stable_for_equal_priority(self):
        rules = build_tag_set(
            [
                "type=raw,value=a,priority=10",
                "type=raw,value=b,priority=10",
                "type=raw,value=c,priority=20",
                "type=raw,value=d,priority=10",
            ]
        )
        assert [r.attrs["value"] for r in rules] == ["c", "a", "b", "d"]

    def test_huge_hex_priority_sorts_first(self):
        rules = build_tag_set(["type=schedule", "type=sha,priority=0x" + "f" * 300])
        assert [r.kind for r in rules] == ["sha", "schedule"]

    def test_explicit_priority_overrides_kind(self):
        rules = build_tag_set(["type=schedule", "type=sha,priority=2000"])
        assert [r.kind for r in rules] == ["sha", "schedule"]

    def test_sort_rules_does_not_mutate_input(self):
        rules = [parse_tag("type=sha"), parse_tag("type=schedule")]
        ordered = sort_rules(rules)
        assert [r.kind for r in ordered] == ["schedule", "sha"]
        assert [r.kind for r in rules] == ["sha", "schedule"]

    def test_accepts_any_iterable(self):
        rules = build_tag_set(line for line in ("type=sha", "type=edge"))
        assert [r.kind for r in rules] == ["edge", "sha"]


class TestFailures:
    def test_one_invalid_line_fails_build(self):
        with pytest.raises(
            InvalidAttributeValueError, match="Invalid event for type=ref,event=bogus"
        ):
            build_tag_set(["type=sha", "type=ref,event=bogus", "type=schedule"])

    def test_first_failure_wins(self):
        with pytest.raises(MissingAttributeError):
            build_tag_set(["type=raw", "type=foo"])

    def test_unknown_type_fails_build(self):
        with pytest.raises(UnknownTypeError):
            build_tag_set(["type=schedule", "type=nightly"])

    def test_no_trace_on_failure(self, capsys):
        with pytest.raises(InvalidAttributeValueError):
            build_tag_set(["type=sha", "type=sha,format=huge"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestTrace:
    def test_plain_trace_on_stderr(self, capsys):
        build_tag_set(["type=sha", "type=schedule"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.splitlines() == [
            "[TRACE] Processing tags input",
            "  type=schedule,pattern=nightly,enable=true,priority=1000",
            "  type=sha,prefix=sha-,format=short,enable=true,priority=100",
        ]

    def test_actions_trace_groups_on_stderr(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "TRACE_STYLE", "actions")
        rules = build_tag_set([])
        captured = capsys.readouterr()
        assert captured.out == ""
        out = captured.err.splitlines()
        assert out[0] == "::group::Processing tags input"
        assert out[1:-1] == _specs(rules)
        assert out[-1] == "::endgroup::"

    def test_quiet_suppresses_trace(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "RUNTIME_QUIET", True)
        build_tag_set([])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_trace_disabled(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "TRACE_ENABLED", False)
        build_tag_set([])
        assert capsys.readouterr().err == ""
