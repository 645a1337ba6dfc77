"""
SQL template engine: placeholders, array expansion and conditional blocks.

Binds a template like::

    SELECT *,
           {EXISTS(SELECT 1 FROM r WHERE r.id = t.id AND r.kind = :kind) AS has_kind}
      FROM t
     WHERE TRUE
           {AND @col = :val}
           {AND id IN (:ids[])}
    {LIMIT :limit {OFFSET :offset}}

Placeholders:

* ``:value``     quoted value
* ``@field``     quoted identifier
* ``?0``         positional value (integer binding key)
* ``:values[]``  each element quoted as a value, joined with ", "
* ``@fields[]``  each element quoted as an identifier, joined with ", "

A ``{...}`` block is removed, with all nested blocks, when a placeholder in
it has no value (or is bound to ``Bind.SKIP``). A placeholder outside of
every block must be bound, otherwise ``UnresolvedPlaceholderError``.
``::`` casts are left alone.

Quoting is delegated to a ``Quotation``; results are ``SqlExpression``
instances that can be bound into other templates without being re-quoted.
"""

import logging
import threading
from collections.abc import Mapping, Sequence
from typing import Any

from sqltemplate.core.config import settings
from sqltemplate.engines.sql.codec import decode_quoted, encode_quoted
from sqltemplate.engines.sql.errors import UnresolvedPlaceholderError
from sqltemplate.engines.sql.expression import SqlExpression
from sqltemplate.engines.sql.parser import parse_parameters
from sqltemplate.engines.sql.placeholders import (
    PLACEHOLDER_RE,
    find_placeholders,
    first_placeholder,
    hide_cast_tokens,
    restore_cast_tokens,
)
from sqltemplate.engines.sql.quotation import Quotation, get_quotation
from sqltemplate.engines.sql.quoting import quote_values
from sqltemplate.engines.sql.tokenizer import count_blocks, remove_unused, tokenize, untokenize

_log = logging.getLogger(__name__)

BLOCK_OPEN_TAG = "{"
BLOCK_CLOSE_TAG = "}"


def bind(sql: str, values: Mapping[Any, Any], quotation: Quotation) -> SqlExpression:
    """Bind *values* into the template *sql*; return the finished SQL.

    Raises ``InvalidPlaceholderKeyError`` for bad keys, ``TagMismatchError``
    for unbalanced blocks and ``UnresolvedPlaceholderError`` when a
    placeholder outside of every block has no value.
    """
    has_blocks = BLOCK_OPEN_TAG in sql or BLOCK_CLOSE_TAG in sql

    sql, cast_count = hide_cast_tokens(sql)

    quoted = {key: encode_quoted(text) for key, text in quote_values(values, quotation).items()}

    if quoted:
        sql = PLACEHOLDER_RE.sub(lambda m: quoted.get(m.group(0), m.group(0)), sql)

    if has_blocks:
        tokens = tokenize(sql, BLOCK_OPEN_TAG, BLOCK_CLOSE_TAG)
        kept = remove_unused(tokens)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(
                "sql template: %d binding(s), %d of %d block(s) removed",
                len(quoted),
                count_blocks(tokens) - count_blocks(kept),
                count_blocks(tokens),
            )
        sql = untokenize(kept)

    placeholder = first_placeholder(sql)
    if placeholder is not None:
        raise UnresolvedPlaceholderError(placeholder, BLOCK_OPEN_TAG, BLOCK_CLOSE_TAG)

    # quoted data is still encoded here, so only template casts are restored
    if cast_count > 0:
        sql = restore_cast_tokens(sql)
    sql = decode_quoted(sql)

    if settings.LOG_SQL:
        _log.debug("sql template bound: %s", sql)
    return SqlExpression(sql)


# Reserved placeholders for bind_each().
_ROW_KEYS = (":row", ":value")
_ROW_ARRAY_KEYS = (":row[]", ":value[]")
_ROW_FIELD_KEYS = ("@row[]", "@value[]")


def _row_values(key: Any, row: Any, used: set[str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if isinstance(key, str):
        values["@key"] = key
        values[":key"] = key
    if isinstance(row, Mapping):
        elements: Any = list(row.values())
        fields: Any = list(row.keys())
    else:
        elements = row
        fields = row
    values.update(dict.fromkeys(_ROW_KEYS, row))
    values.update(dict.fromkeys(_ROW_ARRAY_KEYS, elements))
    values.update(dict.fromkeys(_ROW_FIELD_KEYS, fields))
    return {k: v for k, v in values.items() if k in used}


def bind_each(
    sql: str,
    rows: Mapping[Any, Any] | Sequence[Any],
    quotation: Quotation,
    params: Mapping[Any, Any] | None = None,
) -> dict[Any, SqlExpression] | list[SqlExpression]:
    """Call ``bind()`` once per row of *rows*.

    Reserved placeholders, bound per row:

    * ``@key``, ``:key`` - row key, only for string keys (mapping rows)
    * ``:row``, ``:value`` - the row itself
    * ``:row[]``, ``:value[]`` - the row elements (mapping: its values)
    * ``@row[]``, ``@value[]`` - the row elements as identifiers (mapping: its keys)

    *params* are bound into every row; reserved placeholders win on conflict.
    Returns a dict keyed like *rows* for a mapping, a list otherwise.
    """
    used = set(find_placeholders(sql))
    shared = dict(params or {})

    def _bind_row(key: Any, row: Any) -> SqlExpression:
        return bind(sql, {**shared, **_row_values(key, row, used)}, quotation)

    if isinstance(rows, Mapping):
        return {key: _bind_row(key, row) for key, row in rows.items()}
    if isinstance(rows, (str, bytes)):
        raise TypeError("bind_each() rows must be a mapping or a sequence, not a string")
    return [_bind_row(index, row) for index, row in enumerate(rows)]


class SqlTemplateEngine:
    """Binds SQL templates with a fixed ``Quotation``."""

    def __init__(self, quotation: Quotation) -> None:
        self.quotation = quotation

    def bind(self, sql: str, values: Mapping[Any, Any] | None = None) -> SqlExpression:
        """Bind *values* into *sql*; see ``bind()``."""
        return bind(sql, values or {}, self.quotation)

    def bind_each(
        self,
        sql: str,
        rows: Mapping[Any, Any] | Sequence[Any],
        params: Mapping[Any, Any] | None = None,
    ) -> dict[Any, SqlExpression] | list[SqlExpression]:
        """Bind *sql* once per row; see ``bind_each()``."""
        return bind_each(sql, rows, self.quotation, params)

    def parse_parameters(self, sql: str) -> list[str]:
        """Sorted unique placeholders used in *sql*; see ``parse_parameters()``."""
        return parse_parameters(sql)


_default_engine: SqlTemplateEngine | None = None
_default_lock = threading.Lock()


def get_engine() -> SqlTemplateEngine:
    """Return the shared engine for ``settings.DIALECT``."""
    global _default_engine
    with _default_lock:
        if _default_engine is None:
            _default_engine = SqlTemplateEngine(get_quotation(settings.DIALECT))
        return _default_engine
