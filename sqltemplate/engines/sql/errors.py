"""
Errors raised while binding a SQL template.

All of them are usage errors: the template or the binding map is wrong,
nothing is retried and no partially bound SQL is returned.
"""


class SqlTemplateError(ValueError):
    """Base class for SQL template binding errors."""

    pass


class TagMismatchError(SqlTemplateError):
    """Raised when block tags are unbalanced or open and close tags are equal."""

    def __init__(self, message: str, *, open_tag: str, close_tag: str, depth: int | None = None) -> None:
        super().__init__(message)
        self.open_tag = open_tag
        self.close_tag = close_tag
        self.depth = depth


class InvalidPlaceholderKeyError(SqlTemplateError):
    """Raised when a binding map key is not a supported placeholder."""

    def __init__(self, key: object, reason: str) -> None:
        super().__init__(f"Placeholder key {key!r} is not supported: {reason}")
        self.key = key


class UnresolvedPlaceholderError(SqlTemplateError):
    """Raised when a placeholder outside of any block has no bound value."""

    def __init__(self, placeholder: str, open_tag: str = "{", close_tag: str = "}") -> None:
        super().__init__(
            f"Placeholder {placeholder!r} was not replaced: it is not inside a "
            f"'{open_tag}' ... '{close_tag}' block and the binding map has no "
            f"value for {placeholder!r}."
        )
        self.placeholder = placeholder


class InvalidBindingValueError(SqlTemplateError):
    """Raised when a binding value cannot be quoted, e.g. a sentinel inside a list."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Value for placeholder {key!r} is not supported: {reason}")
        self.key = key
