# -*- coding: utf-8 -*-
"""
This module provides the rule engine of the 2048 game.

It includes the tile and direction types, the game state machine (moves, merges, tile spawns, rendering view
and snapshots) and the move legality checks used to detect the end of a game.
"""

from .gamemove import illegal_actions, is_done, legal_actions, legal_actions_mask
from .gamestate import GameState, TilesView
from .tile import Direction, Tile, TileState

__all__ = [
    "Direction",
    "GameState",
    "Tile",
    "TileState",
    "TilesView",
    "legal_actions",
    "legal_actions_mask",
    "illegal_actions",
    "is_done",
]
