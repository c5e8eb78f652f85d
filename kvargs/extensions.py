# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made `ParserExtension` implementations.

- `NullExtension`: Accepts nothing and contributes no usage text.
- `CallbackExtension`: Wraps two plain functions as an extension.
- `OptionTable`: Declarative option registry with type coercion, choices and
  generated usage text, for tools that do not want to hand-write both hooks.

Example Usage:
    options = OptionTable()
    options.add_option("count", type=int, default=1, help="number of repeats")
    options.add_option("verbose", type=bool, default=False, help="chatty output")

    parser = ArgumentParser(extension=options)
    parser.run(["tool", "count=3", "verbose"])

    options.get("count")  # 3
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import EnumMeta
from typing import Any, Callable

from kvargs.exceptions import KvargsError
from kvargs.logger import logger
from kvargs.parser.parser_types import DEFAULT_DELIMITER, HELP_COLUMN, HELP_OPTIONS
from kvargs.parser.utils import coerce_value
from kvargs.protocols import NullExtension

__all__ = ["CallbackExtension", "NullExtension", "OptionSpec", "OptionTable"]


class CallbackExtension:
    """Adapts a `handle_option` function and an optional `describe_usage` function."""

    def __init__(
        self,
        handle_option: Callable[[str, str], bool],
        describe_usage: Callable[[], str] | None = None,
    ) -> None:
        if not callable(handle_option):
            raise TypeError(f"{handle_option} is not callable")
        if describe_usage is not None and not callable(describe_usage):
            raise TypeError(f"{describe_usage} is not callable")
        self._handle_option = handle_option
        self._describe_usage = describe_usage

    def handle_option(self, option: str, value: str) -> bool:
        return bool(self._handle_option(option, value))

    def describe_usage(self) -> str:
        if self._describe_usage is None:
            return ""
        return self._describe_usage() or ""


@dataclass
class OptionSpec:
    """
    Describes one option accepted by an `OptionTable`.

    Attributes:
        name (str): The option key as typed on the command line.
        help (str): One-line description shown in usage output.
        type (Any): Target type for `coerce_value`. `bool` options may be given bare.
        default (Any): Value reported before the option is seen.
        choices (list[Any] | None): Allowed values after coercion.
    """

    name: str
    help: str = ""
    type: Any = str
    default: Any = None
    choices: list[Any] | None = None

    @property
    def is_flag(self) -> bool:
        return self.type is bool

    def get_value_text(self) -> str:
        """Placeholder shown after the delimiter in usage output."""
        if self.choices:
            choices = (str(getattr(choice, "value", choice)) for choice in self.choices)
            return "<" + "|".join(choices) + ">"
        if isinstance(self.type, EnumMeta):
            return "<" + "|".join(str(member.value) for member in self.type) + ">"
        type_name = getattr(self.type, "__name__", "value")
        return f"<{type_name.upper()}>"

    def get_usage_text(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        value_text = f"{delimiter}{self.get_value_text()}"
        if self.is_flag:
            value_text = f"[{value_text}]"
        lines = [f"  {self.name}{value_text}"]
        if self.help:
            lines.append(f"{'':<{HELP_COLUMN}}{self.help}")
        return "\n".join(lines) + "\n"


@dataclass
class OptionTable:
    """Collects option definitions and the values parsed for them."""

    delimiter: str = DEFAULT_DELIMITER
    options: dict[str, OptionSpec] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)

    def add_option(
        self,
        name: str,
        help: str = "",
        type: Any = str,
        default: Any = None,
        choices: list[Any] | None = None,
    ) -> OptionSpec:
        """
        Register an option.

        Raises:
            KvargsError: If the name is empty, reserved for help, contains the
                delimiter, or is already registered.
        """
        if not name:
            raise KvargsError("Option name cannot be empty")
        if name in HELP_OPTIONS:
            raise KvargsError(f"Option name '{name}' is reserved for help")
        if self.delimiter in name:
            raise KvargsError(
                f"Option name '{name}' cannot contain the delimiter '{self.delimiter}'"
            )
        if name in self.options:
            raise KvargsError(f"Option '{name}' is already registered")
        spec = OptionSpec(
            name=name,
            help=help,
            type=type,
            default=default,
            choices=list(choices) if choices is not None else None,
        )
        self.options[name] = spec
        self.values[name] = default
        return spec

    def handle_option(self, option: str, value: str) -> bool:
        spec = self.options.get(option)
        if spec is None:
            return False
        if not value:
            if not spec.is_flag:
                logger.warning("Option '%s' requires a value", option)
                return False
            self.values[option] = True
            return True
        try:
            coerced = coerce_value(value, spec.type)
        except ValueError as error:
            logger.warning("Invalid value for '%s': %s", option, error)
            return False
        if spec.choices and coerced not in spec.choices:
            logger.warning(
                "Invalid value for '%s': %r is not one of %s",
                option,
                value,
                spec.choices,
            )
            return False
        self.values[option] = coerced
        logger.debug("Set option '%s' to %r", option, coerced)
        return True

    def describe_usage(self) -> str:
        return "".join(
            spec.get_usage_text(self.delimiter) for spec in self.options.values()
        )

    def get(self, name: str, default: Any = None) -> Any:
        value = self.values.get(name)
        return default if value is None else value

    def as_dict(self) -> dict[str, Any]:
        return dict(self.values)
