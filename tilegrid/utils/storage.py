"""
Snapshot storage: keeps a game between sessions as a JSON file.
"""

import json
import logging
from pathlib import Path

from tilegrid.config import DEFAULT_STORAGE_PATH, GameConfiguration
from tilegrid.core import GameState

_logger = logging.getLogger(__name__)


class GameStorage:
    """
    Load and save a game snapshot.

    Parameters
    ----------
    path : Path | str, optional
        Location of the snapshot file (default is ``DEFAULT_STORAGE_PATH``).
    config : GameConfiguration, optional
        Rules given to restored or fresh games.
    """

    def __init__(self, path: Path | str | None = None, config: GameConfiguration | None = None):
        self.path = Path(path) if path is not None else DEFAULT_STORAGE_PATH
        self.config = config

    def load(self) -> GameState:
        """
        Restore the stored game.

        Returns
        -------
        GameState
            The stored game, or a new one if nothing is stored or the snapshot cannot be read.
        """
        if not self.path.exists():
            return GameState.new_game(config=self.config)

        try:
            with open(self.path, "r", encoding="utf-8") as file_h:
                data = json.load(file_h)
            return GameState.from_dict(data, config=self.config)
        except (OSError, ValueError) as error:
            _logger.warning("Could not restore game from %s, starting a new one: %s", self.path, error)
            return GameState.new_game(config=self.config)

    def save(self, state: GameState):
        """
        Store a game, replacing the previous snapshot.

        Parameters
        ----------
        state : GameState
            The game to store.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as file_h:
            json.dump(state.to_dict(), file_h)
        _logger.debug("Saved game to %s", self.path)

    def clear(self):
        """Remove the stored snapshot, if any."""
        self.path.unlink(missing_ok=True)
