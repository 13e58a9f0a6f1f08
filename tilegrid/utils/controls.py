"""
Keyboard controls: translate key names into game commands.

Key names are the ones Matplotlib reports in ``KeyEvent.key``.
"""

import logging

from tilegrid.config import GameConfiguration
from tilegrid.core import Direction, GameState

_logger = logging.getLogger(__name__)

# ##: Arrow keys and their WASD aliases.
KEY_BINDINGS: dict[str, Direction] = {
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
}

# ##: Keys starting a new game.
NEW_GAME_KEYS = frozenset({"backspace", "n"})


def handle_key(state: GameState, key: str | None, config: GameConfiguration | None = None) -> GameState:
    """
    Apply the command bound to a key.

    Parameters
    ----------
    state : GameState
        The current game.
    key : str | None
        Name of the pressed key.
    config : GameConfiguration, optional
        Rules used if a new game is started (default is the rules of ``state``).

    Returns
    -------
    GameState
        ``state`` itself after a move or an unknown key, or a brand new game.
    """
    if key in NEW_GAME_KEYS:
        _logger.info("New game requested")
        return GameState.new_game(config=config or state.config)

    direction = KEY_BINDINGS.get(key)
    if direction is not None:
        state.move(direction)
    return state
