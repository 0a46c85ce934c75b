"""
Tag specification line parser.

One line such as ``type=ref,event=pr,prefix=pull-`` becomes one TagRule
with kind defaults and universal defaults (``enable``, ``priority``)
filled in. Any problem raises a TagSpecError subclass; a partial rule is
never returned.
"""

from tagspec._utils import is_number
from tagspec.exceptions import (
    InvalidAttributeValueError,
    MissingAttributeError,
    UnknownTypeError,
)
from tagspec.kinds import (
    DEFAULT_KIND,
    ENABLE_VALUES,
    REF_EVENTS,
    SHA_FORMATS,
    default_priority,
    get_kind,
    is_kind,
)
from tagspec.models import TagRule
from tagspec.tokenizer import split_fields


def parse_tag(line):
    """Parse one specification line into a fully defaulted TagRule."""
    kind = None
    attrs = {}
    for token in split_fields(line):
        key, sep, value = token.partition("=")
        if not sep:
            attrs["value"] = token.strip()
            continue
        key = key.strip().lower()
        value = value.strip()
        if key == "type":
            if not is_kind(value):
                raise UnknownTypeError(f"Unknown tag type attribute: {value}")
            kind = value
        else:
            attrs[key] = value

    if kind is None:
        kind = DEFAULT_KIND

    _apply_kind_rules(kind, attrs, line)

    if "enable" not in attrs:
        attrs["enable"] = "true"
    if "priority" not in attrs:
        attrs["priority"] = default_priority(kind)
    elif not is_number(attrs["priority"]):
        raise InvalidAttributeValueError(f"Invalid priority for {line}")
    if attrs["enable"] not in ENABLE_VALUES:
        raise InvalidAttributeValueError(
            f"Invalid value for enable attribute: {attrs['enable']}"
        )

    return TagRule(kind=kind, attrs=attrs)


def _apply_kind_rules(kind, attrs, line):
    """Fill kind defaults and validate kind-specific attributes in place."""
    for name in get_kind(kind).requires:
        if name not in attrs:
            raise MissingAttributeError(f"Missing {name} attribute for {line}")

    if kind == "schedule":
        attrs.setdefault("pattern", "nightly")

    elif kind == "semver":
        attrs.setdefault("value", "")

    elif kind == "match":
        attrs.setdefault("group", "0")
        if not is_number(attrs["group"]):
            raise InvalidAttributeValueError(f"Invalid match group for {line}")
        attrs.setdefault("value", "")

    elif kind == "edge":
        attrs.setdefault("branch", "")

    elif kind == "ref":
        if attrs["event"] not in REF_EVENTS:
            raise InvalidAttributeValueError(f"Invalid event for {line}")
        if attrs["event"] == "pr":
            attrs.setdefault("prefix", "pr-")

    elif kind == "sha":
        attrs.setdefault("prefix", "sha-")
        attrs.setdefault("format", "short")
        if attrs["format"] not in SHA_FORMATS:
            raise InvalidAttributeValueError(f"Invalid format for {line}")
