"""
Theme and Text Configuration
"""


class Theme:
    """Dialog styles and fixed strings"""

    # Colors
    PRIMARY = "cyan"
    WARNING = "yellow"
    ERROR = "red"

    # Styles
    PROMPT_STYLE = "bold yellow"
    INPUT_STYLE = PRIMARY
    CANCELLED_STYLE = WARNING

    # Text
    CANCELLED_TEXT = "Cancelled"
