# kvargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used as the kvargs text sink."""
from rich.console import Console

from kvargs.themes import get_kvargs_theme

console = Console(color_system="auto", theme=get_kvargs_theme())
