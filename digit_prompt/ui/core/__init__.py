"""Core dialog components"""
from .controller import DialogController
from .state import DialogState, DialogContext, EditBuffer, Confirmed, Cancelled, DialogResult
from .terminal import PosixTerminal, TerminalModeGuard, TerminalCapabilityFault
from .events import KeyReader
from .screen import ConsoleScreen

__all__ = [
    'DialogController',
    'DialogState',
    'DialogContext',
    'EditBuffer',
    'Confirmed',
    'Cancelled',
    'DialogResult',
    'PosixTerminal',
    'TerminalModeGuard',
    'TerminalCapabilityFault',
    'KeyReader',
    'ConsoleScreen',
]
