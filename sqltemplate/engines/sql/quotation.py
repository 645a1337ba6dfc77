"""
Quoting capabilities for the SQL template engine.

The engine never escapes anything itself: it calls ``quote()`` for values and
``quote_field()`` for identifiers on whatever object it was given. Any object
with those two methods is a ``Quotation``; the classes below cover the usual
dialects.

Value quoting rules (shared by the dialects):

* ``None`` -> ``NULL``
* ``bool`` -> ``TRUE`` / ``FALSE``
* ``int`` / ``float`` / ``Decimal`` -> numeric literal (NaN / infinity rejected)
* ``date`` / ``datetime`` / ``time`` -> quoted ISO text
* ``dict`` -> quoted JSON
* ``list`` / ``tuple`` -> dialect array / row literal
* everything else -> quoted string
"""

import json
import math
from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from sqltemplate.engines.sql.expression import Bind, SqlExpression


@runtime_checkable
class Quotation(Protocol):
    """Turns raw values and identifiers into dialect-safe SQL text."""

    def quote(self, value: Any) -> str: ...

    def quote_field(self, value: Any) -> str: ...


def _number(value: int | float | Decimal) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Cannot quote non-finite number: {value!r}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValueError(f"Cannot quote non-finite number: {value!r}")
    return str(value)


class _BaseQuotation:
    """Shared scalar rules; subclasses define strings, identifiers and arrays."""

    identifier_quote = '"'

    def quote(self, value: Any) -> str:
        if isinstance(value, Bind):
            raise ValueError(f"Cannot quote sentinel {value}")
        if isinstance(value, SqlExpression):
            return str(value)
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, (int, float, Decimal)):
            return _number(value)
        if isinstance(value, (datetime, date, time)):
            return self.quote_string(value.isoformat())
        if isinstance(value, dict):
            return self.quote_string(json.dumps(value, default=str))
        if isinstance(value, (list, tuple)):
            return self.quote_array([self.quote(v) for v in value])
        return self.quote_string(str(value))

    def quote_string(self, s: str) -> str:
        s = s.replace("'", "''")
        return f"'{s}'"

    def quote_array(self, items: list[str]) -> str:
        return "(" + ", ".join(items) + ")"

    def quote_field(self, value: Any) -> str:
        """Quote an identifier; dotted names are quoted part by part."""
        if isinstance(value, SqlExpression):
            return str(value)
        if not isinstance(value, str) or not value:
            raise ValueError(f"Identifier must be a non-empty string, got {value!r}")
        q = self.identifier_quote
        parts = []
        for part in value.split("."):
            if part == "*":
                parts.append(part)
                continue
            if not part:
                raise ValueError(f"Identifier has an empty part: {value!r}")
            parts.append(q + part.replace(q, q + q) + q)
        return ".".join(parts)


class PostgresQuotation(_BaseQuotation):
    """PostgreSQL: ``"ident"``, ``'str'`` (standard_conforming_strings), ``ARRAY[...]``."""

    identifier_quote = '"'

    def quote_string(self, s: str) -> str:
        if "\x00" in s:
            raise ValueError("PostgreSQL strings cannot contain NUL characters")
        return super().quote_string(s)

    def quote_array(self, items: list[str]) -> str:
        return "ARRAY[" + ", ".join(items) + "]"


# Backslash must be escaped for MySQL unless NO_BACKSLASH_ESCAPES is set.
_MYSQL_STRING_ESCAPE = str.maketrans(
    {
        "\\": "\\\\",
        "'": "''",
        "\x00": "\\0",
        "\n": "\\n",
        "\r": "\\r",
        "\x1a": "\\Z",
    }
)


class MySQLQuotation(_BaseQuotation):
    """MySQL / MariaDB: ```ident```, backslash-escaped strings, ``(a, b)`` rows."""

    identifier_quote = "`"

    def quote_string(self, s: str) -> str:
        return "'" + s.translate(_MYSQL_STRING_ESCAPE) + "'"


class PassthroughQuotation:
    """Inserts ``str(value)`` unchanged. For tests and trusted data only."""

    def quote(self, value: Any) -> str:
        return str(value)

    def quote_field(self, value: Any) -> str:
        return str(value)


QUOTATIONS: dict[str, Callable[[], Quotation]] = {
    "postgres": PostgresQuotation,
    "mysql": MySQLQuotation,
    "passthrough": PassthroughQuotation,
}


def get_quotation(dialect: str) -> Quotation:
    """Return a new quotation for *dialect* (``postgres``, ``mysql``, ``passthrough``)."""
    try:
        factory = QUOTATIONS[dialect.lower()]
    except KeyError as e:
        raise ValueError(
            f"Unsupported SQL dialect: {dialect!r}. Supported: {', '.join(sorted(QUOTATIONS))}"
        ) from e
    return factory()
