# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocol an embedding tool implements to extend
`ArgumentParser` with its own options.

Any object with these two methods can be composed into a parser; no base
class is required.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ParserExtension(Protocol):
    def handle_option(self, option: str, value: str) -> bool:
        """Interpret one option/value pair. Return False if the option is unknown."""
        ...

    def describe_usage(self) -> str:
        """Return preformatted usage text for the extension's options."""
        ...


class NullExtension:
    """Rejects every option and contributes no usage text."""

    def handle_option(self, option: str, value: str) -> bool:
        return False

    def describe_usage(self) -> str:
        return ""
