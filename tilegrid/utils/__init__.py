# -*- coding: utf-8 -*-
"""
Collaborators around the game engine: keyboard controls and snapshot storage.

The Matplotlib window lives in ``tilegrid.utils.windows`` and is imported explicitly, so that using the engine
never requires a display.
"""

from .controls import KEY_BINDINGS, NEW_GAME_KEYS, handle_key
from .storage import GameStorage

__all__ = ["KEY_BINDINGS", "NEW_GAME_KEYS", "handle_key", "GameStorage"]
