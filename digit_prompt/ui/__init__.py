"""
Digit Prompt UI Package

Main entry point for the two-line numeric input dialog.
"""
import sys
from typing import Optional

from rich.console import Console

from .core import (
    DialogController,
    DialogResult,
    Confirmed,
    Cancelled,
    ConsoleScreen,
    KeyReader,
    PosixTerminal,
    TerminalCapabilityFault,
)
from ..config import DialogConfig


def make_console() -> Console:
    return Console(emoji=False, highlight=False, force_terminal=True)


def run_int_input_dialog(
    x: int,
    y: int,
    prompt: str,
    config: Optional[DialogConfig] = None,
    *,
    screen=None,
    source=None,
    terminal=None,
) -> DialogResult:
    """
    Show the input dialog and wait for the user to confirm or cancel

    Args:
        x: 1-based screen column
        y: 1-based screen row of the prompt; the input line is y + 1
        prompt: Prompt text, printed verbatim
        config: DialogConfig (prefix, max_digits, bell)
        screen, source, terminal: Collaborators; default to the process's
            console and stdin

    Returns:
        Confirmed(value) or Cancelled()

    Raises:
        TerminalCapabilityFault: terminal mode could not be set up or
            restored, or stdin was closed
    """
    if screen is None:
        screen = ConsoleScreen(make_console())
    if source is None or terminal is None:
        try:
            fd = sys.stdin.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalCapabilityFault(f"stdin has no usable file descriptor: {e}") from e
        source = source or KeyReader(fd)
        terminal = terminal or PosixTerminal(fd)

    controller = DialogController(screen, source, terminal, config)
    return controller.run(x, y, prompt)


__all__ = [
    'run_int_input_dialog',
    'make_console',
    'DialogController',
    'DialogConfig',
    'Confirmed',
    'Cancelled',
    'TerminalCapabilityFault',
]
