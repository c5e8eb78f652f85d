"""A tool that writes its own extension class instead of using OptionTable."""
from dataclasses import dataclass

from kvargs import ArgumentParser
from kvargs.utils import setup_logging

setup_logging(mode="cli")


@dataclass
class ResizeOptions:
    width: int = 640
    height: int = 480
    keep_aspect: bool = False

    def handle_option(self, option: str, value: str) -> bool:
        if option in ("width", "height"):
            if not value.isdigit():
                return False
            setattr(self, option, int(value))
            return True
        if option == "keep-aspect" and not value:
            self.keep_aspect = True
            return True
        return False

    def describe_usage(self) -> str:
        return (
            "  width=<PIXELS>\n"
            "                       output width (default 640)\n"
            "  height=<PIXELS>\n"
            "                       output height (default 480)\n"
            "  keep-aspect\n"
            "                       preserve the aspect ratio\n"
        )


if __name__ == "__main__":
    options = ResizeOptions()
    ArgumentParser(extension=options).run()
    print(options)
