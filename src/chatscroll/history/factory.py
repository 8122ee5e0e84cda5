"""Factory for creating history state instances."""

from typing import Any

from .state import HistoryState


def create_history_state(
    height: int = 0,
    width: int = 0,
    debug_callback: Any | None = None
) -> HistoryState:
    """Create an empty history state ready to receive messages.

    Args:
        height: Initial viewport height in rows
        width: Initial viewport width in terminal cells
        debug_callback: Optional Callable(level, component, message)

    Returns:
        HistoryState instance

    Raises:
        ValueError: If either dimension is negative
    """
    if height < 0 or width < 0:
        raise ValueError(
            f"Invalid viewport dimensions: {width}x{height}. "
            f"Width and height must be >= 0"
        )

    state = HistoryState()
    if debug_callback is not None:
        state.set_debug_callback(debug_callback)
    state.set_dimensions(height, width)
    return state
