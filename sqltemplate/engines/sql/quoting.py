"""
Quote binding map values through a ``Quotation``.

Turns ``{key: raw value}`` into ``{key: quoted text}``. The input mapping is
never modified; skipped keys are simply left out of the result.
"""

from collections.abc import Callable, Mapping
from typing import Any

from sqltemplate.engines.sql.errors import InvalidBindingValueError, InvalidPlaceholderKeyError
from sqltemplate.engines.sql.expression import Bind, SqlExpression
from sqltemplate.engines.sql.placeholders import (
    ARRAY_SUFFIX,
    CAST_TOKEN,
    FIELD_PREFIX,
    POSITIONAL_PREFIX,
    PREFIXES,
    is_placeholder,
)
from sqltemplate.engines.sql.quotation import Quotation

ARRAY_SEPARATOR = ", "

_ARRAY_TYPES = (list, tuple)


def normalize_key(key: Any) -> str:
    """Validate a binding key; integer keys become positional ``?N`` keys."""
    if isinstance(key, int) and not isinstance(key, bool):
        if key < 0:
            raise InvalidPlaceholderKeyError(key, "positional index must be >= 0")
        return f"{POSITIONAL_PREFIX}{key}"
    if not isinstance(key, str):
        raise InvalidPlaceholderKeyError(key, "keys must be str or non-negative int")
    if len(key) <= 1:
        raise InvalidPlaceholderKeyError(key, "key is too short")
    if key[0] not in PREFIXES:
        raise InvalidPlaceholderKeyError(key, f"key must start with one of {' '.join(PREFIXES)}")
    if CAST_TOKEN in key:
        raise InvalidPlaceholderKeyError(key, f"key must not contain {CAST_TOKEN!r}")
    if not is_placeholder(key):
        raise InvalidPlaceholderKeyError(key, "key does not match the placeholder syntax")
    return key


def _quote_one(name: str, value: Any, quote: Callable[[Any], str]) -> str:
    if isinstance(value, Bind):
        raise InvalidBindingValueError(name, f"{value} is only allowed as the whole value")
    if isinstance(value, SqlExpression):
        return str(value)
    return quote(value)


def quote_values(values: Mapping[Any, Any], quotation: Quotation) -> dict[str, str]:
    """Quote every entry of *values*; return a new ``{placeholder: text}`` dict.

    * ``Bind.SKIP`` entries are dropped.
    * ``Bind.KEEP`` entries become empty text.
    * ``@`` keys are quoted as identifiers, ``:`` and ``?`` keys as values.
    * ``key[]`` with a list or tuple value quotes each element and joins
      them with ``", "``; other values are quoted as a whole.
    * ``SqlExpression`` values and elements are inserted verbatim.
    * a sentinel nested in a list, or two keys naming the same placeholder
      (``0`` and ``"?0"``), is an error.
    """
    quoted: dict[str, str] = {}
    seen: set[str] = set()
    for key, value in values.items():
        name = normalize_key(key)
        if name in seen:
            raise InvalidPlaceholderKeyError(key, f"duplicates placeholder {name!r}")
        seen.add(name)
        if value is Bind.SKIP:
            continue
        if value is Bind.KEEP:
            quoted[name] = ""
            continue
        quote = quotation.quote_field if name[0] == FIELD_PREFIX else quotation.quote
        if name.endswith(ARRAY_SUFFIX) and isinstance(value, _ARRAY_TYPES):
            quoted[name] = ARRAY_SEPARATOR.join(_quote_one(name, v, quote) for v in value)
        else:
            if isinstance(value, _ARRAY_TYPES) and any(isinstance(v, Bind) for v in value):
                raise InvalidBindingValueError(name, "sentinels are not allowed inside a list")
            quoted[name] = _quote_one(name, value, quote)
    return quoted
