"""
Parse placeholder names from a SQL template.
"""

from sqltemplate.engines.sql.placeholders import find_placeholders


def parse_parameters(template: str) -> list[str]:
    """
    Extract placeholders (``:name``, ``@name``, ``?0``, with ``[]`` when present)
    used anywhere in the template, blocks included.

    Returns a sorted list without duplicates. ``::`` casts are not placeholders.
    """
    return sorted(set(find_placeholders(template)))
