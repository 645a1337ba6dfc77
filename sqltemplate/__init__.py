"""
sqltemplate: SQL templates with placeholders and conditional blocks.

Exports: SqlTemplateEngine, SqlExpression, Bind, bind, bind_each, raw, get_engine.
"""

from sqltemplate.engines.sql import (
    Bind,
    SqlExpression,
    SqlTemplateEngine,
    bind,
    bind_each,
    get_engine,
    raw,
)

__all__ = [
    "Bind",
    "SqlExpression",
    "SqlTemplateEngine",
    "bind",
    "bind_each",
    "get_engine",
    "raw",
]
