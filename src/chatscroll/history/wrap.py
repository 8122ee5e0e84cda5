"""Line wrapping for chat messages.

Hides how text is measured and broken into terminal rows:
- Display width is counted in terminal cells, so wide glyphs take two columns
- Text is broken between words where possible and never inside a character
- Each message is laid out behind a "username: " gutter
"""

import re

from rich.cells import cell_len, get_character_cell_size

from .config import (
    CLEAR_COLOR,
    CURRENT_COLOR,
    GUTTER_SEPARATOR,
    LINE_ENCODING,
    MIN_WRAP_WIDTH,
)
from .models import ChatMessage

_TOKEN_RE = re.compile(r"\s+|\S+")


def display_width(text: str) -> int:
    """Return the number of terminal cells needed to show text."""
    return cell_len(text)


def _chop(word: str, width: int) -> list[str]:
    """Break a word into pieces no wider than width cells.

    A character wider than width is placed on a piece of its own.
    """
    pieces: list[str] = []
    piece = ""
    piece_width = 0
    for char in word:
        char_width = get_character_cell_size(char)
        if piece and piece_width + char_width > width:
            pieces.append(piece)
            piece = ""
            piece_width = 0
        piece += char
        piece_width += char_width
    pieces.append(piece)
    return pieces


def _wrap_paragraph(paragraph: str, width: int) -> list[str]:
    lines: list[str] = []
    line = ""
    line_width = 0

    for token in _TOKEN_RE.findall(paragraph):
        token_width = cell_len(token)
        if line_width + token_width <= width:
            line += token
            line_width += token_width
            continue

        if token.isspace():
            # whitespace at a soft break is dropped
            if line:
                lines.append(line)
            line = ""
            line_width = 0
            continue

        if line.strip():
            lines.append(line.rstrip())
            line = ""
            line_width = 0

        if token_width <= width:
            line = token
            line_width = token_width
            continue

        pieces = _chop(token, width)
        lines.extend(pieces[:-1])
        line = pieces[-1]
        line_width = cell_len(line)

    # a row left empty by dropped trailing whitespace is not kept
    if line or not lines:
        lines.append(line)
    return lines


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap text so that no row is wider than width cells.

    Embedded newlines are kept as hard breaks. Words that do not fit on a
    row of their own are broken at character boundaries.

    Args:
        text: Text to wrap
        width: Maximum row width in terminal cells (clamped to at least 1)

    Returns:
        Rows without trailing newlines; always at least one row
    """
    width = max(width, MIN_WRAP_WIDTH)
    rows: list[str] = []
    for paragraph in text.split("\n"):
        rows.extend(_wrap_paragraph(paragraph, width))
    return rows


def render_message_lines(
    message: ChatMessage,
    width: int,
    highlighted: bool = False
) -> list[bytes]:
    """Lay out one message as terminal rows.

    If a user "foo" sent a long message, the result looks like::

        foo: jsdkfljsdfkljsfkljsdkfj
             jskfldjfkdjsflsdkfjsldf
             jksdfljskdfjslkfjsldkfj

    Continuation rows are padded with as many spaces as the gutter is wide,
    so the body stays aligned. Every row ends with a newline.

    Args:
        message: Message to render
        width: Total row width in terminal cells, gutter included
        highlighted: Wrap the whole block in the highlight colour pair

    Returns:
        Encoded rows, first row first
    """
    first_prefix = message.username + GUTTER_SEPARATOR
    gutter_width = display_width(first_prefix)
    other_prefix = " " * gutter_width

    rows = wrap_text(message.content, width - gutter_width)
    lines = [first_prefix + rows[0] + "\n"]
    lines.extend(other_prefix + row + "\n" for row in rows[1:])

    if highlighted:
        lines[0] = CURRENT_COLOR + lines[0]
        lines[-1] += CLEAR_COLOR

    return [line.encode(LINE_ENCODING) for line in lines]
