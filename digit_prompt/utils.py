import logging
from pathlib import Path


def setup_logging(log_path: Path, level: str = "INFO") -> logging.Logger:
    """Configures and returns the logger."""
    logger = logging.getLogger("digit_prompt")
    logger.setLevel(level)

    # Remove existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    # File handler only: the dialog owns the screen
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except Exception as e:
        print(f"Failed to setup log file handler: {e}")

    return logger
