"""
Configuration for the tile grid engine and its collaborators.

The board itself is always 4x4; only the rules that can reasonably vary between
variants (spawn distribution, win threshold) live here.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# ##>: Fixed board geometry.
BOARD_SIZE = 4
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# ##>: Default location of the persisted snapshot.
DEFAULT_STORAGE_PATH = Path(
    os.environ.get('TILEGRID_STORAGE', Path.home() / '.tilegrid' / 'game_state.json')
)


@dataclass(frozen=True)
class GameConfiguration:
    """
    Rules of a game.

    Attributes
    ----------
    win_value : int
        Tile value that wins the game once produced by a merge.
    spawn_values : tuple[int, ...]
        Values a freshly spawned tile can take.
    spawn_probs : tuple[float, ...]
        Probability of each entry of ``spawn_values``.
    initial_tiles : int
        Number of tiles spawned on a new game.
    """

    win_value: int = 2048
    spawn_values: tuple[int, ...] = (2, 4)  # 90% for 2, 10% for 4
    spawn_probs: tuple[float, ...] = (0.9, 0.1)
    initial_tiles: int = 2

    def __post_init__(self):
        if len(self.spawn_values) != len(self.spawn_probs):
            raise ValueError('spawn_values and spawn_probs must have the same length')
        if abs(sum(self.spawn_probs) - 1.0) > 1e-9:
            raise ValueError(f'spawn_probs must sum to 1, got {sum(self.spawn_probs)}')
        if self.initial_tiles < 0:
            raise ValueError(f'initial_tiles must be >= 0, got {self.initial_tiles}')


DEFAULT_CONFIG = GameConfiguration()
