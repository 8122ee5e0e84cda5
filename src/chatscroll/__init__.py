"""
Chatscroll: a line-wrapped, scrollable chat history for fixed-size terminals.

The history module hides how messages are ordered, wrapped and clipped to
the viewport; the cli module is a thin command-line front end over it.
"""

__version__ = "0.1.0"

from .history import (
    CLEAR_COLOR,
    CURRENT_COLOR,
    ChatMessage,
    HistoryState,
    create_history_state,
)

__all__ = [
    "CLEAR_COLOR",
    "CURRENT_COLOR",
    "ChatMessage",
    "HistoryState",
    "create_history_state",
]
