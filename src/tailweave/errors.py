"""Exception types for structural failures.

Rule-level misses (an unknown modifier, a relational variant without its
marker, a missing alpha source) are not exceptions; they surface as ``None``.
"""


class ParseError(Exception):
    """Raised when source text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SelectorParseError(ParseError):
    """Raised when a selector string does not match the selector grammar."""


class CssParseError(ParseError):
    """Raised when stylesheet source contains a parse error."""


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or malformed."""


class UnknownVariantError(KeyError):
    """Raised by explicit registry lookups for a variant that is not registered."""
