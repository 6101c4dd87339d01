"""
Dialog Controller - Two-line numeric input dialog

This is the heart of the dialog. It manages:
- Rendering of the prompt and input lines
- Raw terminal mode for the duration of the input loop
- The per-keystroke state machine over the edit buffer
"""
import logging

from .state import DialogState, DialogContext, EditBuffer, Confirmed, Cancelled, DialogResult
from .terminal import TerminalModeGuard
from ..keymap import KeyMap
from ..widgets import draw_prompt_line, draw_input_line, draw_cancelled
from ...config import DialogConfig

logger = logging.getLogger("digit_prompt")


class DialogController:
    """
    Runs one input dialog at a time.

    Collaborators are passed in so tests can substitute fakes:
        screen: move_to / clear_line / write / newline / bell
        source: read_char, blocking
        terminal: capture / install_raw / restore
    """

    def __init__(self, screen, source, terminal, config: DialogConfig = None):
        self.screen = screen
        self.source = source
        self.terminal = terminal
        self.config = config or DialogConfig()
        self.context = self._new_context()

    def run(self, x: int, y: int, prompt: str) -> DialogResult:
        """
        Show the dialog at (x, y) and block until RETURN or ESCAPE

        Returns:
            Confirmed with the typed value, or Cancelled
        """
        if x < 1 or y < 1:
            raise ValueError(f"dialog position must be 1-based, got ({x}, {y})")

        self.context = self._new_context()
        logger.info(f"Input dialog opened at ({x}, {y})")

        draw_prompt_line(self.screen, x, y, prompt)
        self._render(x, y)

        with TerminalModeGuard(self.terminal):
            while not self.context.done:
                self.handle_key(self.source.read_char())
                if not self.context.done:
                    self._render(x, y)

        if self.context.state == DialogState.CANCELLED:
            draw_cancelled(self.screen, x, y)
        self.screen.newline()

        logger.info(f"Input dialog closed: {self.context.state.value} ({self.context.alerts} alerts)")
        return self.context.result

    def handle_key(self, key: str) -> None:
        """Apply one keystroke to the dialog context"""
        ctx = self.context

        if KeyMap.is_cancel(key):
            ctx.buffer.digits.clear()
            ctx.result = Cancelled()
            ctx.state = DialogState.CANCELLED

        elif KeyMap.is_enter(key):
            if ctx.buffer.is_empty():
                self._reject(key, "nothing to confirm")
            else:
                ctx.result = Confirmed(ctx.buffer.value())
                ctx.state = DialogState.CONFIRMED

        elif KeyMap.is_delete(key):
            if not ctx.buffer.pop():
                self._reject(key, "nothing to delete")

        elif KeyMap.is_digit(key):
            if not ctx.buffer.push(key):
                self._reject(key, "buffer full")

        else:
            self._reject(key, "not accepted")

    def _new_context(self) -> DialogContext:
        return DialogContext(buffer=EditBuffer(capacity=self.config.max_digits))

    def _reject(self, key: str, reason: str) -> None:
        logger.debug(f"Rejected key {key!r}: {reason}")
        self.context.alerts += 1
        if self.config.bell is not None:
            self.config.bell()
        else:
            self.screen.bell()

    def _render(self, x: int, y: int) -> None:
        draw_input_line(self.screen, x, y, self.config.prefix, self.context.buffer.text())
