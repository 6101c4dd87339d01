"""
Number Input Widget - the dialog's two screen lines

Pure draw functions - each one positions the cursor itself, so they can
be called in any order.
"""
from ..theme import Theme


def draw_prompt_line(screen, x: int, y: int, prompt: str) -> None:
    """Top line: the prompt, printed verbatim"""
    screen.move_to(x, y)
    screen.clear_line()
    screen.write(prompt, style=Theme.PROMPT_STYLE)


def draw_input_line(screen, x: int, y: int, prefix: str, digits: str) -> None:
    """
    Bottom line: prefix followed by the typed digits.

    Leaves the cursor right after the last digit, where the next one
    would be echoed.
    """
    screen.move_to(x, y + 1)
    screen.clear_line()
    screen.write(prefix)
    screen.write(digits, style=Theme.INPUT_STYLE)
    screen.move_to(x + len(prefix) + len(digits), y + 1)


def draw_cancelled(screen, x: int, y: int) -> None:
    """Replace the bottom line with the cancelled notice"""
    screen.move_to(x, y + 1)
    screen.clear_line()
    screen.write(Theme.CANCELLED_TEXT, style=Theme.CANCELLED_STYLE)
