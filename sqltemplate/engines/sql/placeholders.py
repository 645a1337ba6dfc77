"""
Placeholder grammar, scanner and cast-token guard.

Placeholders:

* ``:name`` / ``:name[]`` - value
* ``@name`` / ``@name[]`` - field identifier
* ``?0`` / ``?0[]``       - positional value (integer binding key)

A trailing ``[]`` asks for array expansion. The PostgreSQL cast ``::`` shares
its first character with the value prefix, so ``field::text`` is hidden
behind a private marker before any scanning and restored at the very end.
"""

import re

VALUE_PREFIX = ":"
FIELD_PREFIX = "@"
POSITIONAL_PREFIX = "?"
PREFIXES = (VALUE_PREFIX, FIELD_PREFIX, POSITIONAL_PREFIX)

ARRAY_SUFFIX = "[]"

CAST_TOKEN = "::"
CAST_REPLACEMENT = "\x01^^\x02"

# Shared by every scanning call site: the substitution pass, the pruner
# and the leftover check.
PLACEHOLDER_RE = re.compile(
    r"""
    (?: [:@] [A-Za-z_] [A-Za-z0-9_]*
      | \? [0-9]+
    )
    (?: \[\] )?
    """,
    re.VERBOSE,
)


def first_placeholder(sql: str) -> str | None:
    """Return the first placeholder found in *sql*, or None."""
    offsets = [i for i in (sql.find(p) for p in PREFIXES) if i >= 0]
    if not offsets:
        return None
    m = PLACEHOLDER_RE.search(sql, min(offsets))
    return m.group(0) if m else None


def find_placeholders(sql: str) -> list[str]:
    """Return every placeholder in *sql*, in order of appearance.

    Cast tokens are ignored: ``id::text`` does not yield ``:text``.
    """
    sql = sql.replace(CAST_TOKEN, CAST_REPLACEMENT)
    return PLACEHOLDER_RE.findall(sql)


def is_placeholder(key: str) -> bool:
    """True if *key* is exactly one placeholder of the grammar."""
    return PLACEHOLDER_RE.fullmatch(key) is not None


def hide_cast_tokens(sql: str) -> tuple[str, int]:
    """Replace every ``::`` with the private marker; return (sql, count)."""
    count = sql.count(CAST_TOKEN)
    if count == 0:
        return sql, 0
    return sql.replace(CAST_TOKEN, CAST_REPLACEMENT), count


def restore_cast_tokens(sql: str) -> str:
    """Inverse of ``hide_cast_tokens``."""
    return sql.replace(CAST_REPLACEMENT, CAST_TOKEN)
