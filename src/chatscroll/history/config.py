"""Rendering constants for the history view.

Centralizes the escape sequences and layout values used when drawing messages.
"""

# CURRENT_COLOR is the ANSI escape sequence used to highlight the selected message
CURRENT_COLOR = "\x1b[0;31m"
# CLEAR_COLOR returns the terminal to its default colour
CLEAR_COLOR = "\x1b[0;0m"

# Text placed between the username and the message body
GUTTER_SEPARATOR = ": "

# Narrowest wrap width used when the gutter leaves no room for content
MIN_WRAP_WIDTH = 1

# Encoding of rendered lines
LINE_ENCODING = "utf-8"


class LogLevel:
    """Severity of debug callback events, ordered so they can be filtered.

    HistoryState reports events with a level string ('debug', 'info',
    'warning', 'error'); these numbers let a callback drop the quiet ones.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _by_name = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Upper-case label for a level, as shown in CLI diagnostics."""
        for label, value in cls._by_name.items():
            if value == level:
                return label.upper()
        return "UNKNOWN"

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert a level string to its number. Unknown strings map to DEBUG."""
        return cls._by_name.get(level_str.lower(), cls.DEBUG)
