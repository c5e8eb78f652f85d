# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the shared `key=value` command-line
parser that small kvargs tools compose with their own option handling.

Each raw argument after the program name is split at the configured delimiter
and routed either to the built-in help option or to the parser's extension.
Parsing stops at the first bad argument: the user sees a diagnostic and the
full usage text, and the caller receives a terminal `ParseOutcome`.

Public Interface:
- `parse(argv)`: Run the dispatch loop and return a `ParseOutcome`.
- `run(argv=None)`: Parse and exit the process on help or failure.
- `get_usage_text()`: Build the usage/help text.
- `print_usage()`: Write the usage/help text to the console.
- `separate_option_from_value(raw)`: Tokenize one argument with this parser's delimiter.

Example Usage:
    options = OptionTable()
    options.add_option("host", help="server to contact")

    parser = ArgumentParser(extension=options)
    outcome = parser.parse(["client", "host=example.org"])

    # outcome.kind == OutcomeKind.SUCCESS
    # options.get("host") == "example.org"
"""
from __future__ import annotations

import sys
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from rich.console import Console

from kvargs.console import console as global_console
from kvargs.exceptions import KvargsError, OptionSyntaxError, UnrecognizedOptionError
from kvargs.logger import logger
from kvargs.parser.parser_types import (
    DEFAULT_DELIMITER,
    HELP_COLUMN,
    HELP_OPTIONS,
    ParsedArgument,
    ParseOutcome,
    ParserConfig,
)
from kvargs.parser.tokenizer import separate_option_from_value
from kvargs.protocols import NullExtension, ParserExtension
from kvargs.signals import HelpSignal
from kvargs.themes import OneColors

if TYPE_CHECKING:
    from kvargs.config import ParserSettings

HELP_ENTRY = "  -h,--help"
HELP_DESCRIPTION = "display usage information (this message)"


class ArgumentParser:
    """
    Generic `key=value` argument parser.

    Tool-specific options are delegated to an extension implementing
    `ParserExtension`. Without one, every option other than help is rejected.

    Args:
        extension (ParserExtension | None): Handles non-help options and
            contributes usage text.
        delimiter (str): Single character separating option from value.
        strict (bool): If False, options the extension rejects are logged and
            skipped instead of ending the parse.
        console (Console | None): Text sink for diagnostics and usage text.
    """

    def __init__(
        self,
        extension: ParserExtension | None = None,
        delimiter: str = DEFAULT_DELIMITER,
        strict: bool = True,
        console: Console | None = None,
    ) -> None:
        if extension is not None and not isinstance(extension, ParserExtension):
            raise TypeError(
                f"{type(extension).__name__} does not implement "
                "handle_option() and describe_usage()"
            )
        self.extension: ParserExtension = (
            extension if extension is not None else NullExtension()
        )
        self.strict: bool = strict
        self.console: Console = console or global_console
        self._config: ParserConfig = ParserConfig(delimiter=delimiter)
        extension_delimiter = getattr(self.extension, "delimiter", None)
        if extension_delimiter is not None and extension_delimiter != delimiter:
            logger.warning(
                "%s uses delimiter %r but the parser uses %r; usage text may not match",
                type(self.extension).__name__,
                extension_delimiter,
                delimiter,
            )

    @classmethod
    def from_settings(
        cls,
        settings: ParserSettings,
        extension: ParserExtension | None = None,
        console: Console | None = None,
    ) -> ArgumentParser:
        """Build a parser from loaded `ParserSettings`."""
        return cls(
            extension=extension,
            delimiter=settings.delimiter,
            strict=settings.strict,
            console=console,
        )

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    @property
    def program_name(self) -> str:
        return self._config.program_name

    def separate_option_from_value(self, raw: str) -> ParsedArgument:
        """Split one raw argument using this parser's delimiter."""
        return separate_option_from_value(raw, self.delimiter)

    def _dispatch(self, argument: ParsedArgument, ignored: list[str]) -> None:
        option = argument.option
        if option in HELP_OPTIONS:
            raise HelpSignal()

        # An empty option (from "=value") is never offered to the extension.
        if option and self.extension.handle_option(option, argument.value):
            logger.debug("Handled option '%s'", option)
            return

        if self.strict:
            raise UnrecognizedOptionError(option)
        logger.warning("Ignoring unsupported option: %s", option)
        ignored.append(option)

    def _print_error(self, message: str) -> None:
        self.console.print(
            f"ERROR: {message}",
            style=f"bold {OneColors.DARK_RED}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _fail(self, error: KvargsError) -> None:
        logger.debug("Parse failed: %s", error)
        self._print_error(str(error))
        self.print_usage()

    def parse(self, argv: Sequence[str] | None) -> ParseOutcome:
        """
        Parse a full argument vector, program name first.

        Args:
            argv (Sequence[str] | None): Raw arguments as supplied by the OS.

        Returns:
            ParseOutcome: SUCCESS when every option was handled, EMPTY_INPUT
            when `argv` is missing or empty, HELP_REQUESTED after printing
            usage for `-h`/`--help`, or FATAL after printing a diagnostic and
            usage for the first bad argument.
        """
        if not argv:
            logger.debug("Unable to parse an empty argument list")
            self._print_error("Unable to parse an empty argument list")
            return ParseOutcome.empty_input()

        self._config = replace(self._config, program_name=argv[0])
        logger.debug("Parsing %d argument(s) for '%s'", len(argv) - 1, argv[0])

        ignored: list[str] = []
        for raw in argv[1:]:
            try:
                argument = self.separate_option_from_value(raw)
                self._dispatch(argument, ignored)
            except HelpSignal:
                self.print_usage()
                return ParseOutcome.help_requested(tuple(ignored))
            except OptionSyntaxError as error:
                self._fail(error)
                return ParseOutcome.fatal(error, raw, tuple(ignored))
            except UnrecognizedOptionError as error:
                self._fail(error)
                return ParseOutcome.fatal(error, error.option, tuple(ignored))

        return ParseOutcome.success(tuple(ignored))

    def run(self, argv: Sequence[str] | None = None) -> ParseOutcome:
        """
        Parse `argv` (default `sys.argv`) and exit on help or failure.

        Returns:
            ParseOutcome: The non-terminal outcome when parsing did not end the process.
        """
        outcome = self.parse(sys.argv if argv is None else argv)
        if outcome.is_terminal:
            sys.exit(outcome.exit_code)
        return outcome

    def get_usage_text(self) -> str:
        """
        Render the usage text.

        The extension's usage text is appended verbatim after the built-in
        help entry.
        """
        lines = [
            f"Usage: {self.program_name} <options>",
            "",
            HELP_ENTRY,
            f"{'':<{HELP_COLUMN}}{HELP_DESCRIPTION}",
            "",
        ]
        return "\n".join(lines) + "\n" + self.extension.describe_usage()

    def print_usage(self) -> None:
        """Write the usage text to the console's file, bypassing rich rendering."""
        sink = self.console.file
        sink.write(self.get_usage_text())
        sink.flush()

    def __str__(self) -> str:
        return (
            f"ArgumentParser(delimiter={self.delimiter!r}, "
            f"program_name={self.program_name!r}, strict={self.strict}, "
            f"extension={type(self.extension).__name__})"
        )

    def __repr__(self) -> str:
        return str(self)
