"""Chat history module for chatscroll.

Module structure (each module hides a design decision):
- models.py: Message representation and validation
- config.py: Escape sequences and layout constants
- wrap.py: Cell-aware word wrapping (how a message becomes rows)
- state.py: Ordering, cursor and viewport (which rows are visible)
- factory.py: Construction of ready-to-use state
"""

from .config import CLEAR_COLOR, CURRENT_COLOR, LogLevel
from .factory import create_history_state
from .models import ChatMessage
from .state import HistoryState, RenderTarget
from .wrap import display_width, render_message_lines, wrap_text

__all__ = [
    "CLEAR_COLOR",
    "CURRENT_COLOR",
    "ChatMessage",
    "HistoryState",
    "LogLevel",
    "RenderTarget",
    "create_history_state",
    "display_width",
    "render_message_lines",
    "wrap_text",
]
