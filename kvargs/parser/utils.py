# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion helpers for extensions that turn option values into Python types.

The core parser never coerces: option values leave the tokenizer as strings.
`OptionTable` uses these helpers to convert them before storing.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Resolve an Enum member by name or value.
- coerce_value: General-purpose coercion, including unions and literals.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Unlike `bool(value)`, unknown strings are rejected so that `verbose=maybe`
    is reported back to the user instead of silently becoming True.

    Raises:
        ValueError: If the string is not a recognised truthy/falsy word.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    if normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"'{value}' is not a boolean value")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """Resolve `value` to a member of `enum_type` by name, then by value."""
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        for lookup in (value, value.upper()):
            try:
                return enum_type[lookup]
            except KeyError:
                pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        members = ", ".join(str(member.value) for member in enum_type)
        raise ValueError(f"'{value}' should be one of {{{members}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert an option value string to `target_type`.

    Args:
        value (str): The raw option value.
        target_type (Any): A type, `Literal[...]`, union, Enum or one-argument callable.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If the value cannot be converted.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(f"'{value}' is not one of {list(args)}")
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"'{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    try:
        return target_type(value)
    except TypeError as error:
        raise ValueError(f"'{value}' could not be coerced: {error}") from error
