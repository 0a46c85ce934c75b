"""
tagspec exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — usage, file and validation errors."""

    exit_code = 1
    error_type = "error"


class TagSpecError(CliError):
    """A tag specification line could not be turned into a rule."""

    error_type = "tag_spec_error"


class UnknownTypeError(TagSpecError):
    """`type=` names a kind that is not in the registry."""

    error_type = "unknown_type"


class MissingAttributeError(TagSpecError):
    """A kind-mandatory attribute is absent."""

    error_type = "missing_attribute"


class InvalidAttributeValueError(TagSpecError):
    """A supplied attribute value fails validation."""

    error_type = "invalid_attribute_value"


class MalformedSpecError(TagSpecError):
    """The line itself cannot be tokenized (e.g. unterminated quote)."""

    error_type = "malformed_spec"
