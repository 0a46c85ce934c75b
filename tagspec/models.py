"""
Typed model for a parsed tag rule.
"""

from dataclasses import dataclass, field

from tagspec._utils import to_number


@dataclass(frozen=True)
class TagRule:
    """One parsed tag specification: a kind plus its string attributes.

    Built once by the parser and only read afterwards. ``attrs`` always
    carries ``enable`` and ``priority`` once parsing completes.
    """

    kind: str
    attrs: dict[str, str] = field(default_factory=dict)

    def __str__(self):
        out = [f"type={self.kind}"]
        for key, value in self.attrs.items():
            out.append(f"{key}={value}")
        return ",".join(out)

    @property
    def enabled(self) -> bool:
        return self.attrs.get("enable") == "true"

    @property
    def priority(self) -> float:
        """Numeric value of the ``priority`` attribute (used for ordering)."""
        return to_number(self.attrs.get("priority", ""))

    def to_dict(self) -> dict:
        return {"type": self.kind, "attrs": dict(self.attrs)}
