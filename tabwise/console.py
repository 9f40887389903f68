# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the Tabwise command line."""
from rich.console import Console
from rich.theme import Theme

TABWISE_THEME = Theme(
    {
        "tabwise.command": "bold #81a1c1",
        "tabwise.option": "#88c0d0",
        "tabwise.value": "#a3be8c",
        "tabwise.error": "bold #bf616a",
        "tabwise.muted": "#4c566a",
    }
)

console = Console(theme=TABWISE_THEME)
