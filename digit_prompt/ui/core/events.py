"""
Key Source - Blocking raw character reader
"""
import os

from .terminal import TerminalCapabilityFault


class KeyReader:
    """Reads one unbuffered keystroke at a time from a file descriptor"""

    def __init__(self, fd: int):
        self.fd = fd

    def read_char(self) -> str:
        """
        Block until one byte arrives and return it as a character.

        Bytes are decoded as Latin-1 so every byte is exactly one character;
        anything outside ASCII is simply a key the dialog rejects.
        """
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            raise TerminalCapabilityFault(f"cannot read from fd {self.fd}: {e}") from e
        if not data:
            raise TerminalCapabilityFault("input stream closed")
        return data.decode("latin-1")
