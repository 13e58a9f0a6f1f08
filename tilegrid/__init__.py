# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 rule engine.

The ``GameState`` class owns the 4x4 board, applies directional moves, merges tiles, spawns new ones and tracks
score and win/loss. The ``utils`` package holds the thin collaborators around it (keyboard controls, snapshot
storage and a Matplotlib board window).
"""

from .config import GameConfiguration
from .core import Direction, GameState, Tile, TileState

__all__ = ["Direction", "GameConfiguration", "GameState", "Tile", "TileState"]
