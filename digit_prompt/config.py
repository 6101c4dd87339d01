import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

# Ten digits always fit the fixed storage the dialog reserves for input
MAX_DIGITS = 10
DEFAULT_PREFIX = "? "

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DialogConfig:
    """Options for one input dialog invocation."""
    prefix: str = DEFAULT_PREFIX
    max_digits: int = MAX_DIGITS
    # Called once per rejected keystroke; None rings the screen's bell
    bell: Optional[Callable[[], None]] = None

    def __post_init__(self):
        if not isinstance(self.max_digits, int) or not 1 <= self.max_digits <= MAX_DIGITS:
            raise ValueError(f"max_digits must be between 1 and {MAX_DIGITS}, got {self.max_digits!r}")


@dataclass
class AppConfig:
    # Paths & Logging
    log_path: str = "logs/digit_prompt.log"
    log_level: str = "INFO"

    # Alerts
    silent_mode: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Builds the configuration from DIGIT_PROMPT_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()

        log_path = env.get("DIGIT_PROMPT_LOG_PATH", "").strip()
        if log_path:
            config.log_path = log_path

        log_level = env.get("DIGIT_PROMPT_LOG_LEVEL", "").strip().upper()
        if log_level:
            if isinstance(logging.getLevelName(log_level), int):
                config.log_level = log_level
            else:
                print(f"Unknown log level {log_level!r}. Using {config.log_level}.")

        silent = env.get("DIGIT_PROMPT_SILENT")
        if silent is not None:
            config.silent_mode = silent.strip().lower() in _TRUTHY

        return config

    def dialog_config(self) -> DialogConfig:
        """Dialog options implied by the process settings."""
        if self.silent_mode:
            return DialogConfig(bell=lambda: None)
        return DialogConfig()
