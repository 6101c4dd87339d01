"""
Keyboard Mapping Configuration
"""
from typing import Set


class KeyMap:
    """Key codes understood by the input dialog"""

    # Escape
    ESC_KEY = "\x1b"

    # Line feed only; carriage return is an ordinary rejected key
    ENTER_KEY = "\n"

    # Deletes the last digit (plays the role of backspace)
    DELETE_KEY = "d"

    # Numbers
    DIGIT_KEYS: Set[str] = {"0", "1", "2", "3", "4", "5", "6", "7", "8", "9"}

    @classmethod
    def is_cancel(cls, key: str) -> bool:
        return key == cls.ESC_KEY

    @classmethod
    def is_enter(cls, key: str) -> bool:
        return key == cls.ENTER_KEY

    @classmethod
    def is_delete(cls, key: str) -> bool:
        return key == cls.DELETE_KEY

    @classmethod
    def is_digit(cls, key: str) -> bool:
        return key in cls.DIGIT_KEYS
