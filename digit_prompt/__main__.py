import sys
from pathlib import Path

from dotenv import load_dotenv

from digit_prompt.config import AppConfig
from digit_prompt.utils import setup_logging
from digit_prompt.ui import run_int_input_dialog, make_console, Confirmed, TerminalCapabilityFault
from digit_prompt.ui.core import ConsoleScreen
from digit_prompt.ui.theme import Theme

# Dialog placement
DIALOG_X = 1
DIALOG_Y = 1
DIALOG_PROMPT = "Enter your number: "


def main() -> int:
    """Main application entry point."""
    # 1. Load Config
    load_dotenv()
    config = AppConfig.from_env()

    # 2. Setup Logging
    logger = setup_logging(Path(config.log_path), config.log_level)
    logger.info("Digit prompt started")

    console = make_console()
    screen = ConsoleScreen(console)
    screen.clear()

    # 3. Run the dialog
    try:
        result = run_int_input_dialog(
            DIALOG_X,
            DIALOG_Y,
            DIALOG_PROMPT,
            config.dialog_config(),
            screen=screen,
        )
    except TerminalCapabilityFault as e:
        console.out(f"Terminal error: {e}", style=Theme.ERROR, highlight=False)
        logger.exception("Input dialog failed")
        return 0

    if isinstance(result, Confirmed):
        console.out(f"Your number is {result.value}")
        logger.info(f"Confirmed value {result.value}")
    else:
        logger.info("Input cancelled")
    return 0


if __name__ == "__main__":
    sys.exit(main())
