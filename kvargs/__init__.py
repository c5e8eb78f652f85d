"""
kvargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .extensions import CallbackExtension, NullExtension, OptionSpec, OptionTable
from .parser import (
    ArgumentParser,
    OutcomeKind,
    ParseOutcome,
    separate_option_from_value,
)
from .protocols import ParserExtension
from .version import __version__

logger = logging.getLogger("kvargs")


__all__ = [
    "ArgumentParser",
    "CallbackExtension",
    "NullExtension",
    "OptionSpec",
    "OptionTable",
    "OutcomeKind",
    "ParseOutcome",
    "ParserExtension",
    "separate_option_from_value",
    "__version__",
]
