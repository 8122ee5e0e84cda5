"""Settings and input helpers for the CLI.

Centralizes reading the viewport and log level from the environment and
loading message files, so commands only deal with a ready HistoryState.

Environment variables:
    CHATSCROLL_WIDTH: Viewport width in cells (default: terminal width)
    CHATSCROLL_HEIGHT: Viewport height in rows (default: terminal height)
    CHATSCROLL_LOG_LEVEL: debug, info, warning or error (default: warning)
"""

import os
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..history import ChatMessage, LogLevel

DEFAULT_LOG_LEVEL = "warning"

_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


def get_viewport(
    width: int | None,
    height: int | None,
    console: Console
) -> tuple[int, int]:
    """Resolve the viewport size.

    Explicit values win, then the environment, then the console size.

    Returns:
        Tuple of (height, width)
    """
    if width is None:
        env_width = os.getenv("CHATSCROLL_WIDTH")
        width = int(env_width) if env_width else console.size.width
    if height is None:
        env_height = os.getenv("CHATSCROLL_HEIGHT")
        height = int(env_height) if env_height else console.size.height
    return height, width


def get_log_level(level: str | None) -> int:
    """Resolve the log level from an option value or CHATSCROLL_LOG_LEVEL."""
    return LogLevel.from_string(level or os.getenv("CHATSCROLL_LOG_LEVEL", DEFAULT_LOG_LEVEL))


def make_debug_printer(
    console: Console,
    min_level: int
) -> Callable[[str, str, str], None]:
    """Build a debug callback that prints messages at or above min_level."""
    def _print(level: str, component: str, message: str) -> None:
        numeric = LogLevel.from_string(level)
        if numeric < min_level:
            return
        style = _LEVEL_STYLES.get(numeric, "dim")
        console.print(
            f"[{style}]{LogLevel.name(numeric)}[/{style}] "
            f"[bold]{component}[/bold]: {escape(message)}"
        )

    return _print


def load_messages(path: Path) -> list[ChatMessage]:
    """Read messages from a JSON Lines file.

    Blank lines are skipped.

    Raises:
        ValueError: If a line is not a valid message; the message names the line
    """
    messages: list[ChatMessage] = []
    with path.open(encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                messages.append(ChatMessage.model_validate_json(line))
            except ValidationError as e:
                raise ValueError(
                    f"{path}:{lineno}: invalid message ({e.error_count()} errors)"
                ) from e
    return messages
