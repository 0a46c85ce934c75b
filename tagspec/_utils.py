"""
Shared pure-utility functions for tagspec.

These helpers have no business logic and no side effects.
"""

_INFINITIES = {"Infinity": float("inf"), "+Infinity": float("inf"), "-Infinity": float("-inf")}
_NON_FINITE_WORDS = {"inf", "infinity", "nan"}


def to_number(text):
    """Convert attribute text to a number the way tag inputs are read.

    Blank text is 0. Accepts decimal integers and floats (with exponent),
    0x/0o/0b integers (too large for a float gives infinity) and the word
    ``Infinity``. Raises ValueError otherwise.
    """
    s = text.strip()
    if not s:
        return 0.0
    if s in _INFINITIES:
        return _INFINITIES[s]
    if "_" in s or s.lower().lstrip("+-") in _NON_FINITE_WORDS:
        raise ValueError(f"not a number: {text!r}")
    if s[:2].lower() in ("0x", "0o", "0b"):
        try:
            return float(int(s, 0))
        except OverflowError:
            return float("inf")
    return float(s)


def is_number(text):
    try:
        to_number(text)
    except ValueError:
        return False
    return True
