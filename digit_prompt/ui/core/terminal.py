"""
Terminal Mode - capture, raw mode install and restore

The dialog echoes everything itself, so while it runs the terminal must
deliver keystrokes one at a time, without echo and without turning
control characters into signals.
"""
import logging
import termios
from typing import Any, List, Optional

logger = logging.getLogger("digit_prompt")

# termios attribute list layout: [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]
_LFLAG = 3
_CC = 6

RAW_LFLAG_MASK = ~(termios.ICANON | termios.ECHO | termios.ISIG)


class TerminalCapabilityFault(RuntimeError):
    """Terminal mode could not be read or restored, or input is gone"""


class PosixTerminal:
    """Terminal mode capability for a POSIX tty file descriptor"""

    def __init__(self, fd: int):
        self.fd = fd

    def capture(self) -> List[Any]:
        """Read the current line-discipline attributes."""
        try:
            return termios.tcgetattr(self.fd)
        except (termios.error, OSError) as e:
            raise TerminalCapabilityFault(f"cannot read terminal mode of fd {self.fd}: {e}") from e

    def install_raw(self, attrs: List[Any]) -> None:
        """Install no-echo, no-canonical, no-signal mode derived from attrs."""
        new_attrs = list(attrs)
        new_attrs[_LFLAG] = attrs[_LFLAG] & RAW_LFLAG_MASK
        cc = list(attrs[_CC])
        cc[termios.VMIN] = 1
        cc[termios.VTIME] = 0
        new_attrs[_CC] = cc
        self._set(new_attrs)

    def restore(self, attrs: List[Any]) -> None:
        self._set(attrs)

    def _set(self, attrs: List[Any]) -> None:
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        except (termios.error, OSError) as e:
            raise TerminalCapabilityFault(f"cannot set terminal mode of fd {self.fd}: {e}") from e


class TerminalModeGuard:
    """
    Scoped raw mode.

    Entering captures the terminal's mode and installs raw mode; leaving
    restores the captured mode on every exit path, exactly once.
    """

    def __init__(self, terminal):
        self.terminal = terminal
        self._saved: Optional[List[Any]] = None

    def __enter__(self) -> "TerminalModeGuard":
        if self._saved is not None:
            raise RuntimeError("terminal mode guard is already held")
        saved = self.terminal.capture()
        self.terminal.install_raw(saved)
        self._saved = saved
        logger.debug("Raw terminal mode installed")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        saved, self._saved = self._saved, None
        if saved is None:
            return
        self.terminal.restore(saved)
        logger.debug("Terminal mode restored")
