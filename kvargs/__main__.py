"""
kvargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from enum import Enum
from typing import Sequence

from kvargs.config import load_settings
from kvargs.console import console
from kvargs.exceptions import ConfigError
from kvargs.extensions import OptionTable
from kvargs.logger import logger
from kvargs.parser import ArgumentParser
from kvargs.utils import setup_logging


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


def build_options(delimiter: str = "=") -> OptionTable:
    options = OptionTable(delimiter=delimiter)
    options.add_option("name", help="name to greet", default="world")
    options.add_option("count", help="number of greetings", type=int, default=1)
    options.add_option("verbose", help="enable debug logging", type=bool, default=False)
    options.add_option("mode", help="run mode", type=Mode, default=Mode.DEV)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Parse `argv` with a demo option set and print the resolved values."""
    argv = list(sys.argv if argv is None else argv)
    try:
        settings = load_settings()
    except ConfigError as error:
        console.print(
            f"ERROR: {error}",
            style="error",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return 1

    options = build_options(settings.delimiter)
    parser = ArgumentParser.from_settings(settings, extension=options)
    outcome = parser.parse(argv)
    if outcome.is_terminal:
        return outcome.exit_code

    setup_logging(
        mode=settings.log_mode,
        console_log_level=logging.DEBUG if options.get("verbose") else logging.WARNING,
    )
    logger.debug("Parsed options: %s", options.as_dict())

    for key, value in options.as_dict().items():
        if isinstance(value, Enum):
            value = value.value
        console.print(
            f"{key}{settings.delimiter}{value}",
            style="value",
            markup=False,
            highlight=False,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
