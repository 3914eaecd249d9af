"""
Graphical window for playing 2048 by hand.

The board is drawn with Matplotlib, one subplot per cell, and key presses are forwarded to a handler.
"""

from collections.abc import Callable

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    A Matplotlib window showing the game board.

    Parameters
    ----------
    title : str
        The title of the window.
    size : int
        Side length of the game board.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: '#CCC0B3',
        2: '#EEE4DA',
        4: '#ECE0C8',
        8: '#ECB280',
        16: '#EC8D53',
        32: '#F57C5F',
        64: '#E95937',
        128: '#F3D96B',
        256: '#F2D04A',
        512: '#E5BF2E',
        1024: '#E2B814',
        2048: '#EBC502',
        4096: '#00A2D8',
    }

    # ##: Color of tiles above the last mapped value.
    HIGH_COLOR = '#9ED682'

    def __init__(self, title: str, size: int):
        self.title = title
        self.fig = plt.figure()
        self.fig.canvas.manager.set_window_title(title)
        self.axes: list = []
        self.texts: list = []
        self.closed = False
        self.resize(size)
        self.fig.canvas.mpl_connect('close_event', self._close_handler)

    def resize(self, size: int) -> None:
        """
        Rebuild the grid of cells for a board of the given size.

        Parameters
        ----------
        size : int
            Side length of the game board.
        """
        self.fig.clear()
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)
        self.fig.patch.set_facecolor('#BBADA0')

        self.size = size
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        self.texts = []
        for ax in self.axes:
            text = ax.text(0.5, 0.5, '', ha='center', va='center', fontsize='x-large', fontweight='demibold')
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Event | None = None):
        """Mark the window as closed."""
        self.closed = True

    def show_image(self, board: ndarray, caption: str = '') -> None:
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        caption : str, optional
            Text shown above the board, e.g. the score.
        """
        if board.shape[0] != self.size:
            self.resize(board.shape[0])

        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else '')
            ax.set_facecolor(self.COLORS.get(value, self.HIGH_COLOR))

        self.fig.suptitle(caption)
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler: Callable) -> None:
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect('key_press_event', key_handler)

    @classmethod
    def show(cls, block: bool = True) -> None:
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self) -> None:
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
