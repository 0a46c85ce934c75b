"""Kind registry — single source of truth for tag rule kinds.

Standalone module (no project imports). Adding a new kind means
appending one KindDefinition to KINDS and teaching the parser its
defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KindDefinition:
    """One tag rule kind (the value of a ``type=`` attribute)."""

    name: str
    default_priority: str
    requires: tuple[str, ...]
    description: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "default_priority": self.default_priority,
            "requires": list(self.requires),
            "description": self.description,
        }


KINDS: tuple[KindDefinition, ...] = (
    KindDefinition("schedule", "1000", (), "Scheduled (nightly) build tag"),
    KindDefinition("semver", "900", ("pattern",), "Semantic version from a git tag"),
    KindDefinition("match", "800", ("pattern",), "Regex group match on a git tag"),
    KindDefinition("edge", "700", (), "Latest state of the default branch"),
    KindDefinition("ref", "600", ("event",), "Branch, tag or pull request reference"),
    KindDefinition("raw", "200", ("value",), "Literal tag value"),
    KindDefinition("sha", "100", (), "Commit hash"),
)

DEFAULT_KIND = "raw"

# -- Allowed attribute values --

REF_EVENTS: tuple[str, ...] = ("branch", "tag", "pr")
SHA_FORMATS: tuple[str, ...] = ("short", "long")
ENABLE_VALUES: tuple[str, ...] = ("true", "false")


# -- Helpers --


def get_kind(name: str) -> KindDefinition:
    """Return a kind by name. Raises KeyError if not found."""
    for kind in KINDS:
        if kind.name == name:
            return kind
    raise KeyError(f"Unknown kind: {name!r}")


def kind_names() -> tuple[str, ...]:
    """Return all kind names in registration order."""
    return tuple(kind.name for kind in KINDS)


def is_kind(name: str) -> bool:
    """Case-sensitive membership test."""
    return name in kind_names()


def default_priority(name: str) -> str:
    """Return the default priority text for a kind. Raises KeyError if unknown."""
    return get_kind(name).default_priority
