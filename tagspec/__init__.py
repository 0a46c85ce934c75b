"""tagspec — parser for image tag specification lines (type + key=value attributes)."""

from tagspec.builder import DEFAULT_TAG_SPECS, build_tag_set, sort_rules
from tagspec.config import VERSION
from tagspec.exceptions import (
    CliError,
    InvalidAttributeValueError,
    MalformedSpecError,
    MissingAttributeError,
    TagSpecError,
    UnknownTypeError,
)
from tagspec.kinds import KINDS, KindDefinition
from tagspec.models import TagRule
from tagspec.parser import parse_tag

__all__ = [
    "VERSION",
    "DEFAULT_TAG_SPECS",
    "KINDS",
    "KindDefinition",
    "TagRule",
    "build_tag_set",
    "parse_tag",
    "sort_rules",
    "CliError",
    "TagSpecError",
    "UnknownTypeError",
    "MissingAttributeError",
    "InvalidAttributeValueError",
    "MalformedSpecError",
]
