"""
Dialog State Management - Enums and Data Structures
"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ...config import MAX_DIGITS


class DialogState(Enum):
    """Input dialog states"""
    EDITING = "editing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Confirmed:
    """User closed the dialog with RETURN"""
    value: int


@dataclass(frozen=True)
class Cancelled:
    """User closed the dialog with ESCAPE"""


DialogResult = Union[Confirmed, Cancelled]


@dataclass
class EditBuffer:
    """Capacity-bounded sequence of ASCII digits"""
    capacity: int = MAX_DIGITS
    digits: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.digits)

    def is_empty(self) -> bool:
        return not self.digits

    def is_full(self) -> bool:
        return len(self.digits) >= self.capacity

    def push(self, digit: str) -> bool:
        """
        Append one digit.

        Returns:
            False if the buffer is already full (nothing appended)
        """
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"not an ASCII digit: {digit!r}")
        if self.is_full():
            return False
        self.digits.append(digit)
        return True

    def pop(self) -> bool:
        """Remove the last digit. Returns False if there was nothing to remove."""
        if self.is_empty():
            return False
        self.digits.pop()
        return True

    def text(self) -> str:
        return "".join(self.digits)

    def value(self) -> int:
        if self.is_empty():
            raise ValueError("empty buffer has no value")
        return int(self.text())


@dataclass
class DialogContext:
    """Complete dialog context - holds the state of one invocation"""
    state: DialogState = DialogState.EDITING
    buffer: EditBuffer = field(default_factory=EditBuffer)
    result: Optional[DialogResult] = None
    alerts: int = 0

    @property
    def done(self) -> bool:
        return self.state != DialogState.EDITING
