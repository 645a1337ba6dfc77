"""
Engines: SQL template binding.
"""

from sqltemplate.engines.sql import SqlTemplateEngine, bind, bind_each, parse_parameters

__all__ = [
    "SqlTemplateEngine",
    "bind",
    "bind_each",
    "parse_parameters",
]
