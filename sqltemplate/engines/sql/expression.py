"""
Finished SQL values and binding sentinels.

``SqlExpression`` marks text that is already valid SQL. It is what ``bind()``
returns, and when it is used as a value in another binding map it is
inserted verbatim instead of being quoted again. This is how larger queries
are assembled from smaller bound fragments without double escaping.
"""

from enum import Enum


class SqlExpression(str):
    """String subclass marking a value as finished, already quoted SQL.

    Instances are immutable like any ``str``. Build them with ``bind()`` or,
    for trusted SQL written by the developer, with ``raw()``.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"SqlExpression({str.__repr__(self)})"


def raw(sql: str) -> SqlExpression:
    """Mark trusted SQL as a finished expression, bypassing quoting entirely.

    Use for fragments the application controls (``NOW()``, ``DEFAULT``,
    a sub-select). NEVER use on untrusted user input.
    """
    if isinstance(sql, SqlExpression):
        return sql
    if not isinstance(sql, str):
        raise TypeError(f"raw() expects a str, got {type(sql).__name__}")
    return SqlExpression(sql)


class Bind(Enum):
    """Sentinels accepted as binding map values.

    * ``SKIP`` - behave as if the key was not given: blocks that need it are
      removed, and outside of blocks it is an unresolved placeholder.
    * ``KEEP`` - bind the key to empty text so the enclosing block survives.
    """

    SKIP = "skip"
    KEEP = "keep"
