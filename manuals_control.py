# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from tilegrid.core import GameState
from tilegrid.utils import GameStorage, handle_key
from tilegrid.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)


class Session:
    """
    The game being played, with where it is stored and where it is drawn.

    Parameters
    ----------
    storage: GameStorage
        Snapshot storage

    window: WindowBoard
        Class to draw the game board
    """

    def __init__(self, storage: GameStorage, window: WindowBoard):
        self.storage = storage
        self.window = window
        self.state: GameState = storage.load()

    def redraw(self):
        """
        Redraw the game board.
        """
        self.window.show_game(self.state)

    def key_handler(self, event: Any):
        """
        Handle the keyboard.

        Parameters
        ----------
        event: Any
            event to handle
        """
        _logger.debug("pressed %s", event.key)

        if event.key == "escape":
            self.window.close()
            return None

        self.state = handle_key(self.state, event.key)
        self.storage.save(self.state)
        self.redraw()

        if self.state.is_game_over():
            print(f"{'won' if self.state.won else 'terminated'}! score={self.state.score}")
        return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    session = Session(GameStorage(), WindowBoard(title="2048 Game"))
    session.window.register_key_handler(session.key_handler)
    session.redraw()

    # Blocking event loop
    session.window.show(block=True)
