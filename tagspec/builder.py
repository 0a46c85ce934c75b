"""
Specification set builder.

Turns zero or more specification lines into the ordered rule list the
tag generator walks: highest priority first, input order kept among
equal priorities.
"""

from tagspec import trace
from tagspec.parser import parse_tag

DEFAULT_TAG_SPECS: tuple[str, ...] = (
    "type=schedule",
    "type=ref,event=branch",
    "type=ref,event=tag",
    "type=ref,event=pr",
)

TRACE_GROUP = "Processing tags input"


def sort_rules(rules):
    """Return *rules* by descending numeric priority (stable)."""
    return sorted(rules, key=lambda rule: rule.priority, reverse=True)


def build_tag_set(lines):
    """Parse every line (or the defaults when none) and return them ordered.

    The first invalid line aborts the whole build.
    """
    lines = list(lines)
    if not lines:
        lines = list(DEFAULT_TAG_SPECS)

    rules = [parse_tag(line) for line in lines]
    ordered = sort_rules(rules)

    with trace.group(TRACE_GROUP):
        for rule in ordered:
            trace.info(str(rule))

    return ordered
