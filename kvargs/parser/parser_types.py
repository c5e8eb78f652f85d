# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Data structures shared by the kvargs tokenizer and `ArgumentParser`.

Contents:
- `ParserConfig`: Immutable per-parser settings (delimiter and program name).
- `ParsedArgument`: One raw argument split into option and value.
- `OutcomeKind` / `ParseOutcome`: The terminal result of a `parse` call. The
  outer command surface maps these onto process exit codes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kvargs.exceptions import InvalidDelimiterError, KvargsError

DEFAULT_DELIMITER = "="
HELP_OPTIONS = frozenset({"h", "-h", "--help"})
HELP_COLUMN = 23
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class ParserConfig:
    """Immutable parser state. `program_name` is filled in by `parse`."""

    delimiter: str = DEFAULT_DELIMITER
    program_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise InvalidDelimiterError(
                f"Delimiter must be a single character, got {self.delimiter!r}"
            )


@dataclass(frozen=True)
class ParsedArgument:
    """A raw argument split at the delimiter."""

    option: str
    value: str = ""
    raw: str = ""

    @property
    def is_flag(self) -> bool:
        return self.value == ""


class OutcomeKind(Enum):
    """How a call to `ArgumentParser.parse` ended."""

    SUCCESS = "success"
    EMPTY_INPUT = "empty_input"
    HELP_REQUESTED = "help_requested"
    FATAL = "fatal"


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of `ArgumentParser.parse`.

    Attributes:
        kind (OutcomeKind): Which terminal state parsing reached.
        error (KvargsError | None): The failure for FATAL outcomes.
        argument (str | None): The offending raw argument or option.
        ignored (tuple[str, ...]): Options skipped when the parser is not strict.
    """

    kind: OutcomeKind
    error: KvargsError | None = None
    argument: str | None = None
    ignored: tuple[str, ...] = ()

    @property
    def exit_code(self) -> int | None:
        """Process exit status for terminal outcomes, None otherwise."""
        if self.kind == OutcomeKind.HELP_REQUESTED:
            return EXIT_SUCCESS
        if self.kind == OutcomeKind.FATAL:
            return EXIT_FAILURE
        return None

    @property
    def is_terminal(self) -> bool:
        return self.exit_code is not None

    @property
    def reason(self) -> str:
        return str(self.error) if self.error else ""

    @classmethod
    def success(cls, ignored: tuple[str, ...] = ()) -> ParseOutcome:
        return cls(OutcomeKind.SUCCESS, ignored=ignored)

    @classmethod
    def empty_input(cls) -> ParseOutcome:
        return cls(OutcomeKind.EMPTY_INPUT)

    @classmethod
    def help_requested(cls, ignored: tuple[str, ...] = ()) -> ParseOutcome:
        return cls(OutcomeKind.HELP_REQUESTED, ignored=ignored)

    @classmethod
    def fatal(
        cls, error: KvargsError, argument: str, ignored: tuple[str, ...] = ()
    ) -> ParseOutcome:
        return cls(OutcomeKind.FATAL, error=error, argument=argument, ignored=ignored)
