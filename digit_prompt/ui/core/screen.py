"""
Screen Surface - cursor addressing and text output through a rich Console
"""
from typing import Optional

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType


class ConsoleScreen:
    """
    Screen surface with 1-based coordinates.

    Control codes go through Console.control(); text goes through
    Console.out() so prompts are never parsed as markup.
    """

    def __init__(self, console: Console):
        self.console = console

    def move_to(self, col: int, row: int) -> None:
        # rich addresses the screen from 0
        self.console.control(Control((ControlType.CURSOR_MOVE_TO, col - 1, row - 1)))

    def clear_line(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))

    def write(self, text: str, style: Optional[str] = None) -> None:
        if text:
            self.console.out(text, style=style, highlight=False, end="")

    def newline(self) -> None:
        self.console.out("", highlight=False)

    def bell(self) -> None:
        # rich drops control codes on dumb terminals, BEL still works there
        if self.console.is_dumb_terminal:
            self.console.file.write("\a")
            self.console.file.flush()
        else:
            self.console.bell()

    def clear(self) -> None:
        self.console.clear()
