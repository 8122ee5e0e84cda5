"""Scrollable chat history state.

HistoryState keeps what is visible in the client and can render it to any
binary writer. It hides:
- How messages are kept in timestamp order
- How the selected message is tracked across inserts
- Which part of the history fits on screen
"""

from bisect import bisect_right
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from .models import ChatMessage
from .wrap import render_message_lines

T = TypeVar("T")


class RenderTarget(Protocol):
    """Anything that accepts encoded rows, such as ``sys.stdout.buffer``."""

    def write(self, data: bytes, /) -> Any:
        ...


def last_n(items: Sequence[T], n: int) -> Sequence[T]:
    """Return the final n items of a sequence (none when n <= 0)."""
    if n <= 0:
        return items[:0]
    if n >= len(items):
        return items
    return items[len(items) - n:]


class HistoryState:
    """Chat history ordered by timestamp, with a viewport and a cursor.

    The first message added becomes the current message. After that the
    selection only changes through cursor_up and cursor_down.

    The selection's position is shifted whenever a message is inserted
    before it, so inserting an older message never moves the cursor to a
    different message, even when message ids repeat.
    """

    def __init__(self) -> None:
        # index 0 holds the oldest message, the last index the newest
        self.history: list[ChatMessage] = []
        self._render_width = 0
        self._render_height = 0
        self._current = ""
        self._current_index = 0
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for state change logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send debug message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    def render_width(self) -> int:
        return self._render_width

    @property
    def render_height(self) -> int:
        return self._render_height

    @property
    def current(self) -> str:
        """Id of the selected message, or an empty string if there is none."""
        return self._current

    @property
    def current_index(self) -> int | None:
        """Position of the selected message in the history, or None."""
        if not self._current:
            return None
        return self._current_index

    def new(self, message: ChatMessage) -> None:
        """Add a newly received message to the history.

        The message is inserted after any messages with the same timestamp,
        so messages sent at the same time keep their arrival order.
        """
        position = bisect_right(self.history, message.timestamp, key=lambda m: m.timestamp)
        self.history.insert(position, message)
        self._debug(
            "debug",
            "history",
            f"added {message.uuid} from {message.username} at {position} "
            f"({len(self.history)} messages)"
        )
        if self._current == "":
            self._current = message.uuid
            self._current_index = position
            self._debug("info", "cursor", f"selected first message {message.uuid}")
        elif position <= self._current_index:
            # inserted before the selection, which shifts one place newer
            self._current_index += 1

    def set_dimensions(self, height: int, width: int) -> None:
        """Update the renderable area so the next render avoids drawing offscreen."""
        self._render_height = height
        self._render_width = width
        self._debug("debug", "viewport", f"dimensions set to {width}x{height}")

    def _move_cursor(self, step: int) -> None:
        if len(self.history) < 2:
            # 0 or 1 messages, nowhere to move
            return
        target = self._current_index + step
        if target < 0 or target >= len(self.history):
            return
        self._current = self.history[target].uuid
        self._current_index = target
        self._debug("debug", "cursor", f"moved to {self._current} at {target}")

    def cursor_down(self) -> None:
        """Select the next newer message, if there is one."""
        self._move_cursor(1)

    def cursor_up(self) -> None:
        """Select the next older message, if there is one."""
        self._move_cursor(-1)

    def render_message(self, message: ChatMessage, width: int) -> list[bytes]:
        """Render one message to rows that fit within width cells.

        The selected message is wrapped in the highlight colour pair.
        """
        return render_message_lines(
            message,
            width,
            highlighted=message.uuid == self._current
        )

    def render(self, target: RenderTarget) -> None:
        """Write the visible part of the history to target.

        Every call draws the whole screen, so target should be empty. Only
        the newest render_height messages are laid out, and of their rows
        only the last render_height are written, oldest first.

        Raises:
            Whatever target.write raises. Rows already written stay written.
        """
        visible_messages = last_n(self.history, self._render_height)
        lines: list[bytes] = []
        for message in visible_messages:
            lines.extend(self.render_message(message, self._render_width))

        visible_lines = last_n(lines, self._render_height)
        self._debug(
            "debug",
            "render",
            f"{len(visible_messages)} messages, {len(lines)} rows, {len(visible_lines)} visible"
        )

        for line in visible_lines:
            try:
                target.write(line)
            except Exception as e:
                self._debug("error", "render", f"write failed: {e}")
                raise
