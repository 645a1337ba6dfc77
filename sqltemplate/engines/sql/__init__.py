"""
SQL template engine.

Exports: SqlTemplateEngine, bind, bind_each, get_engine, parse_parameters,
SqlExpression, raw, Bind, the quotations and the errors.
"""

from sqltemplate.engines.sql.errors import (
    InvalidBindingValueError,
    InvalidPlaceholderKeyError,
    SqlTemplateError,
    TagMismatchError,
    UnresolvedPlaceholderError,
)
from sqltemplate.engines.sql.expression import Bind, SqlExpression, raw
from sqltemplate.engines.sql.parser import parse_parameters
from sqltemplate.engines.sql.quotation import (
    MySQLQuotation,
    PassthroughQuotation,
    PostgresQuotation,
    Quotation,
    get_quotation,
)
from sqltemplate.engines.sql.safety import check_sql_template_safety
from sqltemplate.engines.sql.template_engine import (
    SqlTemplateEngine,
    bind,
    bind_each,
    get_engine,
)

__all__ = [
    "Bind",
    "InvalidBindingValueError",
    "InvalidPlaceholderKeyError",
    "MySQLQuotation",
    "PassthroughQuotation",
    "PostgresQuotation",
    "Quotation",
    "SqlExpression",
    "SqlTemplateEngine",
    "SqlTemplateError",
    "TagMismatchError",
    "UnresolvedPlaceholderError",
    "bind",
    "bind_each",
    "check_sql_template_safety",
    "get_engine",
    "get_quotation",
    "parse_parameters",
    "raw",
]
