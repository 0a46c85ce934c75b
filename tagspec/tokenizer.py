"""Field tokenizer for a single tag specification line.

Splits on top-level commas. A double-quoted run may contain commas
(and ``""`` for a literal quote); the quotes themselves are dropped.
Blank fields are discarded and only the first record of the input is read.
"""

from tagspec.exceptions import MalformedSpecError

_QUOTE = '"'
_SEPARATOR = ","
_RECORD_END = ("\n", "\r")


def split_fields(line):
    """Return the non-blank, whitespace-trimmed fields of *line*.

    Raises MalformedSpecError on an unterminated quote.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == _QUOTE:
                if i + 1 < n and line[i + 1] == _QUOTE:
                    current.append(_QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                current.append(ch)
        elif ch == _QUOTE:
            in_quotes = True
        elif ch == _SEPARATOR:
            fields.append("".join(current))
            current = []
        elif ch in _RECORD_END:
            break
        else:
            current.append(ch)
        i += 1
    if in_quotes:
        raise MalformedSpecError(f"Unterminated quote in {line}")
    fields.append("".join(current))
    return [f.strip() for f in fields if f.strip()]
