# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 Game

This module provides functionality to create and manage a graphical window for displaying a game. It utilizes
Matplotlib for rendering and handling user interactions. The window only reads the game through
``GameState.get_tiles``; it never changes it.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from tilegrid.config import BOARD_SIZE, CELL_COUNT
from tilegrid.core import GameState, Tile


def tile_name(index: int, tile: Tile) -> str:
    """
    Class name describing how a tile is drawn.

    Parameters
    ----------
    index : int
        Cell index of the tile.
    tile : Tile
        The tile to describe.

    Returns
    -------
    str
        For example ``"tile tile-4 tile-position-2-1 tile-merged"``; position is ``column-row``, 1-based, and
        values above 2048 are named ``super``.
    """
    value = str(tile.value) if tile.value <= 2048 else "super"
    name = f"tile tile-{value} tile-position-{index % BOARD_SIZE + 1}-{index // BOARD_SIZE + 1}"
    return f"{name} {tile.style}" if tile.style else name


class WindowBoard:
    """
    A class for rendering and managing the 2048 game board using Matplotlib.

    Methods
    -------
    show_game(state: GameState)
        Update the display with the current game.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.

    Notes
    -----
    - New tiles are outlined in blue and merged tiles in red.
    - Score and game status are shown in the window title.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }
    SUPER_COLOR = "#3C3A32"

    # ##: Outline color per tile style.
    OUTLINES = {"tile-new": "#2E86DE", "tile-merged": "#C0392B"}

    def __init__(self, title: str):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        """
        self.title = title
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes()
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self):
        """
        Set up the axes for the game board, one subplot per cell.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")

        # ##: Remove all ticks and labels for a cleaner game board appearance.
        self.axe.tick_params(axis="both", which="both", length=0)
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(BOARD_SIZE, BOARD_SIZE, index + 1) for index in range(CELL_COUNT)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        self.closed = True

    def _draw_cell(self, index: int, tile: Optional[Tile]):
        """Paint one cell, empty when ``tile`` is None."""
        ax, text = self.axes[index], self.texts[index]
        if tile is None:
            text.set_text("")
            ax.set_facecolor(self.COLORS[0])
            outline, width = "black", 0.5
        else:
            text.set_text(str(tile.value))
            ax.set_facecolor(self.COLORS.get(tile.value, self.SUPER_COLOR))
            outline = self.OUTLINES.get(tile.style, "black")
            width = 3.0 if tile.style else 0.5
        for spine in ax.spines.values():
            spine.set_edgecolor(outline)
            spine.set_linewidth(width)

    def show_game(self, state: GameState):
        """
        Show or update the game board.

        Parameters
        ----------
        state : GameState
            The game to display.

        Notes
        -----
        A merged cell is yielded twice by ``get_tiles``; the merged tile comes last and is the one kept on screen.
        """
        cells: list[Optional[Tile]] = [None] * CELL_COUNT
        for index, tile in state.get_tiles():
            cells[index] = tile
        for index, tile in enumerate(cells):
            self._draw_cell(index, tile)

        status = " - you win!" if state.won else " - game over" if state.over else ""
        self.fig.canvas.manager.set_window_title(f"{self.title} - score {state.score}{status}")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
