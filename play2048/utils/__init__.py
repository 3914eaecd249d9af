"""
Input and output helpers around a game session: key bindings and text rendering.

The Matplotlib window lives in `play2048.utils.windows` and is imported on demand.
"""

from .controls import KEY_BINDINGS, key_to_direction
from .render import render_board

__all__ = ['KEY_BINDINGS', 'key_to_direction', 'render_board']
