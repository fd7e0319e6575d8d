"""ANSI color codes with semantic meanings for the inventory console."""

import platform
import os
import sys

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = "\033[0m"

    # Base palette
    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"
    BOLD = "\033[1m"

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    PRIMARY = "\033[96m"  # Bright Cyan - Commands, interactive elements

    # Status Colors
    SUCCESS = "\033[92m"  # Bright Green - Success, completion
    ERROR = "\033[91m"  # Bright Red - Errors, failures
    WARNING = "\033[93m"  # Bright Yellow - Warnings, cautions
    INFO = "\033[94m"  # Bright Blue - Information, hints

    # UI Component Colors
    PROMPT = "\033[96m"  # Bright Cyan - Input prompts
    HEADER = "\033[1m\033[96m"  # Bold Cyan - Section headers, table headers
    BORDER = "\033[90m"  # Gray - Table rules

    # Data Display Colors
    LABEL = "\033[96m"  # Bright Cyan - Field labels
    VALUE = "\033[97m"  # Bright White - Field values
    MUTED = "\033[90m"  # Gray - Totals, metadata

    @classmethod
    def disable(cls):
        """Blank every code so output is plain text."""
        for name in dir(cls):
            if name.isupper() and isinstance(getattr(cls, name), str):
                setattr(cls, name, "")


def should_use_color(stream=None) -> bool:
    """Colors only go to interactive terminals, and never when NO_COLOR is set."""
    if os.getenv("NO_COLOR"):
        return False
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()
