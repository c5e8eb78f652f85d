"""
kvargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import ArgumentParser
from .parser_types import OutcomeKind, ParsedArgument, ParseOutcome, ParserConfig
from .tokenizer import separate_option_from_value
from .utils import coerce_value

__all__ = [
    "ArgumentParser",
    "OutcomeKind",
    "ParsedArgument",
    "ParseOutcome",
    "ParserConfig",
    "coerce_value",
    "separate_option_from_value",
]
