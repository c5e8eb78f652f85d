# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour constants and the rich Theme used by the kvargs console.

Only the diagnostic styles are coloured. Usage text is written verbatim.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    CYAN = "#56B6C2"


def get_kvargs_theme() -> Theme:
    return Theme(
        {
            "error": f"bold {OneColors.DARK_RED}",
            "value": OneColors.GREEN,
        }
    )
