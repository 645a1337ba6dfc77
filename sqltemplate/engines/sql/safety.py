"""
Static checks for SQL templates - catch mistakes before binding.

Flags placeholders written inside a string literal of the template, e.g.
``WHERE name LIKE '%:name%'``. The quotation already produces a complete
literal, so the result would be double-quoted SQL. Build the pattern in the
application and bind it as a whole instead (``WHERE name LIKE :pattern``).

Also reports unbalanced ``{`` / ``}`` block tags.

Usage::

    warnings = check_sql_template_safety(template)
    # [{"placeholder": ":name", "line": 3, "message": "..."}]
"""

import re
from typing import Any

from sqltemplate.engines.sql.errors import TagMismatchError
from sqltemplate.engines.sql.placeholders import PLACEHOLDER_RE, hide_cast_tokens
from sqltemplate.engines.sql.template_engine import BLOCK_CLOSE_TAG, BLOCK_OPEN_TAG
from sqltemplate.engines.sql.tokenizer import tokenize

_STRING_LITERAL = re.compile(r"'(?:[^']|'')*'")


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def check_sql_template_safety(template: str) -> list[dict[str, Any]]:
    """Analyse a SQL template and return a list of warnings.

    Each warning is a dict with ``placeholder``, ``line``, and ``message``
    keys (``placeholder`` is None for tag problems). An empty list means no
    issues detected.
    """
    warnings: list[dict[str, Any]] = []
    sql, _ = hide_cast_tokens(template)

    for literal in _STRING_LITERAL.finditer(sql):
        for match in PLACEHOLDER_RE.finditer(literal.group(0)):
            name = match.group(0)
            warnings.append(
                {
                    "placeholder": name,
                    "line": _line_of(sql, literal.start() + match.start()),
                    "message": (
                        f"'{name}' is inside a string literal. Its value is quoted "
                        f"already; bind the whole literal instead of quoting around it."
                    ),
                }
            )

    if BLOCK_OPEN_TAG in sql or BLOCK_CLOSE_TAG in sql:
        try:
            tokenize(sql, BLOCK_OPEN_TAG, BLOCK_CLOSE_TAG)
        except TagMismatchError as e:
            warnings.append({"placeholder": None, "line": None, "message": str(e)})

    return warnings
