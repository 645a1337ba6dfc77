"""
Reversible escaping of quoted values.

Quoted data may contain ``?``, ``:``, ``@``, ``{`` or ``}`` (inside string
literals, JSON, etc.). Before a quoted value is put into the template these
characters are replaced by markers guarded with control bytes, so the
placeholder scanner and the block tokenizer never see them. The markers are
turned back into the original characters once the template is fully bound.

The guard bytes themselves are escaped too, so any input round-trips.
"""

import re

_ENCODE_QUOTED: dict[str, str] = {
    "\x01": "\x011\x02",
    "\x02": "\x012\x02",
    ":": "\x013\x02",
    "@": "\x014\x02",
    "{": "\x015\x02",
    "}": "\x016\x02",
    "?": "\x017\x02",
}

_DECODE_QUOTED: dict[str, str] = {marker: char for char, marker in _ENCODE_QUOTED.items()}

_ENCODE_TABLE = str.maketrans(_ENCODE_QUOTED)
_DECODE_RE = re.compile("|".join(re.escape(marker) for marker in _DECODE_QUOTED))


def encode_quoted(value: str) -> str:
    """Hide template syntax characters of a quoted value behind markers."""
    return value.translate(_ENCODE_TABLE)


def decode_quoted(sql: str) -> str:
    """Restore every marker produced by ``encode_quoted`` in *sql*."""
    if "\x01" not in sql:
        return sql
    return _DECODE_RE.sub(lambda m: _DECODE_QUOTED[m.group(0)], sql)
