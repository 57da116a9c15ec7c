import os
from typing import Union

from rich.console import Console
from rich.text import Text

console = Console()


def clear_terminal() -> None:
    """Clear the terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def render_line(line: Union[str, Text]) -> None:
    """Render a single scrollback line via Rich."""
    if isinstance(line, Text):
        console.print(line)
    else:
        # Scrollback text is literal, never Rich markup
        console.print(line, markup=False, highlight=False)
