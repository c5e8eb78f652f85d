# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Splits a single raw command-line argument into an option and a value."""
from kvargs.exceptions import AmbiguousOptionError, EmptyOptionError, MissingValueError
from kvargs.parser.parser_types import DEFAULT_DELIMITER, ParsedArgument


def separate_option_from_value(
    raw: str, delimiter: str = DEFAULT_DELIMITER
) -> ParsedArgument:
    """
    Split `raw` at the single occurrence of `delimiter`.

    `key=value` yields `("key", "value")` and a bare `key` yields `("key", "")`.
    `=value` is accepted with an empty option; the parser rejects it later.

    Raises:
        AmbiguousOptionError: The delimiter appears more than once.
        MissingValueError: The delimiter is the final character.
        EmptyOptionError: `raw` is empty.
    """
    count = raw.count(delimiter)
    if count > 1:
        raise AmbiguousOptionError(raw)
    if count == 0:
        if not raw:
            raise EmptyOptionError(raw)
        return ParsedArgument(option=raw, value="", raw=raw)

    option, _, value = raw.partition(delimiter)
    if not value:
        raise MissingValueError(raw)
    return ParsedArgument(option=option, value=value, raw=raw)
