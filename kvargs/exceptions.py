# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by kvargs.

Parsing failures are raised inside the dispatch loop and converted into
`ParseOutcome` values by `ArgumentParser.parse`, so callers only see them
attached to an outcome. Configuration and setup errors propagate normally.

Exception Hierarchy:
- KvargsError
    ├── InvalidDelimiterError
    ├── ConfigError
    ├── UnrecognizedOptionError
    └── OptionSyntaxError
            ├── AmbiguousOptionError
            ├── MissingValueError
            └── EmptyOptionError
"""


class KvargsError(Exception):
    """Base exception for kvargs."""


class InvalidDelimiterError(KvargsError):
    """Exception raised when a delimiter is not exactly one character."""


class ConfigError(KvargsError):
    """Exception raised when parser settings cannot be loaded or validated."""


class OptionSyntaxError(KvargsError):
    """Exception raised when a raw argument cannot be split into option and value."""

    def __init__(self, raw: str, message: str = "") -> None:
        self.raw = raw
        super().__init__(message or f"Invalid argument string: {raw}")


class AmbiguousOptionError(OptionSyntaxError):
    """The delimiter occurs more than once in the raw argument."""


class MissingValueError(OptionSyntaxError):
    """The delimiter is the last character of the raw argument."""


class EmptyOptionError(OptionSyntaxError):
    """The raw argument is empty."""


class UnrecognizedOptionError(KvargsError):
    """Exception raised when no handler accepts an option."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unsupported option: {option}")
