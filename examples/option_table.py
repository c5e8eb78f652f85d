from pathlib import Path

from kvargs import ArgumentParser, OptionTable
from kvargs.utils import setup_logging

setup_logging(mode="cli")

options = OptionTable()
options.add_option("input", help="file to read", type=Path)
options.add_option("retries", help="attempts before giving up", type=int, default=3)
options.add_option("dry-run", help="show what would happen", type=bool, default=False)
options.add_option("level", help="log level", choices=["debug", "info", "warning"])

# Unknown options are logged and skipped instead of ending the parse.
parser = ArgumentParser(extension=options, strict=False)

if __name__ == "__main__":
    outcome = parser.run()
    if outcome.ignored:
        print(f"ignored: {', '.join(outcome.ignored)}")
    for key, value in options.as_dict().items():
        print(f"{key}={value}")
