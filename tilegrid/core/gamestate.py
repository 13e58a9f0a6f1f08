"""
State machine of a 2048 game: the 16-cell grid, the score and the terminal flags.

A ``GameState`` is mutated only by ``move`` and ``spawn_random_tile``. Everything else is a read-only
projection for the presentation layer or a snapshot for the persistence layer.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Any

from numpy import asarray, int64, ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from tilegrid.config import BOARD_SIZE, CELL_COUNT, DEFAULT_CONFIG, GameConfiguration
from tilegrid.core.gamemove import is_done, legal_actions
from tilegrid.core.tile import Direction, Tile, TileState

# ##>: Module-level generator, used unless a game is given its own.
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def _check_value(value: int) -> int:
    """Ensure a tile value is a power of two of at least 2."""
    if value < 2 or value & (value - 1):
        raise ValueError(f'Tile value must be a power of two >= 2, got {value}')
    return value


def _tile_from_dict(cell: dict[str, Any]) -> Tile:
    """Rebuild one tile from its snapshot entry."""
    prev_pos = cell.get('prev_pos')
    if prev_pos is not None and not 0 <= int(prev_pos) < CELL_COUNT:
        raise ValueError(f'Previous position out of the board: {prev_pos}')
    return Tile(
        value=_check_value(int(cell['value'])),
        state=TileState(cell['state']),
        prev_pos=None if prev_pos is None else int(prev_pos),
    )


class TilesView:
    """
    Lazy, restartable projection of the occupied cells of a grid.

    Iterating yields ``(index, tile)`` pairs in index order. A merged tile is yielded twice at its index: first
    a static copy holding half its value (the tile it absorbed), then the merged tile itself. Tiles are copies,
    so consumers cannot alter the game through them.
    """

    def __init__(self, grid: Sequence[Tile | None]):
        self._grid = grid

    def __iter__(self) -> Iterator[tuple[int, Tile]]:
        for index, tile in enumerate(self._grid):
            if tile is None:
                continue
            if tile.state is TileState.MERGED:
                yield index, Tile(value=tile.value // 2, state=TileState.STATIC, prev_pos=tile.prev_pos)
            yield index, replace(tile)


class GameState:
    """
    A 2048 game on a 4x4 board.

    Cells are addressed by a linear index ``row * 4 + col``. Once the game is won or over, moves are ignored;
    a new game is obtained by building a new instance.
    """

    def __init__(
        self,
        grid: Iterable[Tile | None] | None = None,
        generate_tiles: bool = True,
        rng: Generator | None = None,
        config: GameConfiguration | None = None,
    ):
        """
        Initialize a game from an existing grid.

        Parameters
        ----------
        grid : Iterable[Tile | None], optional
            The 16 cells in row-major order, ``None`` for empty ones (default is an empty board).
        generate_tiles : bool, optional
            Whether random tiles are spawned after moves (default is True).
        rng : Generator, optional
            Random source for spawns (default is a module-level generator).
        config : GameConfiguration, optional
            Rules of the game.

        Raises
        ------
        ValueError
            If the grid does not hold exactly 16 cells.
        """
        cells = [None] * CELL_COUNT if grid is None else list(grid)
        if len(cells) != CELL_COUNT:
            raise ValueError(f'A grid holds {CELL_COUNT} cells, got {len(cells)}')

        self.config = config or DEFAULT_CONFIG
        self._grid: list[Tile | None] = cells
        self._score = 0
        self._won = False
        self._generate_tiles = generate_tiles
        self._rng = rng if rng is not None else _GENERATOR
        self._over = is_done(self.values)

    @classmethod
    def new_game(
        cls, seed: int | None = None, rng: Generator | None = None, config: GameConfiguration | None = None
    ) -> 'GameState':
        """
        Start a fresh game with its initial random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of a dedicated random generator, for reproducible games.
        rng : Generator, optional
            Random source, ignored when ``seed`` is given.
        config : GameConfiguration, optional
            Rules of the game.

        Returns
        -------
        GameState
            An empty board with ``config.initial_tiles`` tiles spawned on it.
        """
        if seed is not None:
            rng = default_rng(seed)
        state = cls(generate_tiles=True, rng=rng, config=config)
        for _ in range(state.config.initial_tiles):
            state.spawn_random_tile()
        return state

    @classmethod
    def from_values(
        cls,
        values,
        generate_tiles: bool = False,
        rng: Generator | None = None,
        config: GameConfiguration | None = None,
    ) -> 'GameState':
        """
        Build a game from tile values, 0 meaning an empty cell.

        Parameters
        ----------
        values : array_like
            16 values in row-major order, or a 4x4 matrix.
        generate_tiles : bool, optional
            Whether random tiles are spawned after moves (default is False).
        rng : Generator, optional
            Random source for spawns.
        config : GameConfiguration, optional
            Rules of the game.

        Returns
        -------
        GameState
            The game holding a new tile for every non-zero value.
        """
        flat = asarray(values).ravel().tolist()
        grid = [Tile(_check_value(int(value))) if value else None for value in flat]
        return cls(grid, generate_tiles=generate_tiles, rng=rng, config=config)

    @property
    def score(self) -> int:
        """Sum of the values produced by every merge so far."""
        return self._score

    @property
    def won(self) -> bool:
        """Whether a merge has produced the winning value."""
        return self._won

    @property
    def over(self) -> bool:
        """Whether no move can change the board anymore."""
        return self._over

    @property
    def generate_tiles(self) -> bool:
        """Whether random tiles are spawned after moves."""
        return self._generate_tiles

    @generate_tiles.setter
    def generate_tiles(self, enabled: bool):
        self._generate_tiles = enabled

    @property
    def values(self) -> list[int]:
        """Tile values in index order, 0 for empty cells."""
        return [0 if tile is None else tile.value for tile in self._grid]

    @property
    def board(self) -> ndarray:
        """Tile values as a 4x4 matrix, 0 for empty cells."""
        return asarray(self.values, dtype=int64).reshape(BOARD_SIZE, BOARD_SIZE)

    @property
    def max_tile(self) -> int:
        """Highest tile value on the board, 0 on an empty board."""
        return max(self.values)

    def is_game_over(self) -> bool:
        """Check whether the game has reached a terminal state (won or over)."""
        return self._over or self._won

    def legal_moves(self) -> list[Direction]:
        """Directions that would change the board, empty once the game is terminal."""
        if self.is_game_over():
            return []
        return legal_actions(self.values)

    def spawn_random_tile(self) -> int | None:
        """
        Spawn a tile on a random empty cell.

        Returns
        -------
        int | None
            Index of the new tile, or None if spawning is disabled or the board is full.

        Notes
        -----
        - The cell is drawn uniformly among the empty ones.
        - The value follows ``config.spawn_values`` / ``config.spawn_probs`` (2 at 90%, 4 at 10% by default).
        """
        if not self._generate_tiles:
            return None

        # ##: Only if there are still available places.
        empty_cells = [index for index, tile in enumerate(self._grid) if tile is None]
        if not empty_cells:
            return None

        index = empty_cells[int(self._rng.integers(len(empty_cells)))]
        value = int(self._rng.choice(self.config.spawn_values, p=self.config.spawn_probs))
        self._grid[index] = Tile(value)

        _logger.debug('Spawned %d at cell %d', value, index)
        return index

    def _prepare_move(self):
        """Mark every tile static and remember where it stands."""
        for index, tile in enumerate(self._grid):
            if tile is not None:
                tile.state = TileState.STATIC
                tile.prev_pos = index

    def _merge(self, source: int, target: int) -> bool:
        """
        Merge the tile at ``source`` into the tile at ``target`` if allowed.

        Returns
        -------
        bool
            True if the merge happened.
        """
        tile, merge_tile = self._grid[source], self._grid[target]
        if merge_tile is None or merge_tile.state is TileState.MERGED or merge_tile != tile:
            return False

        merge_tile.update(merge_tile.value * 2, TileState.MERGED)
        self._grid[source] = None
        self._score += merge_tile.value

        if merge_tile.value == self.config.win_value and not self._won:
            self._won = True
            _logger.info('Reached %d, game won with score %d', merge_tile.value, self._score)
        return True

    def move(self, direction: Direction | int) -> bool:
        """
        Slide every tile towards an edge, merging equal neighbours.

        Parameters
        ----------
        direction : Direction | int
            The edge tiles slide towards (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        bool
            True if at least one tile slid or merged.

        Notes
        -----
        - Nothing happens once the game is won or over.
        - Each line is scanned from the edge inwards; a tile merges into the last placed tile of its line when
          both are equal and that tile was not itself produced by a merge during this move.
        - A random tile is spawned only if the board changed.
        """
        if self.is_game_over():
            return False

        direction = Direction(direction)
        start, step, line_step = direction.increment
        self._prepare_move()

        moved = False
        index = start
        for _ in range(BOARD_SIZE):
            line_start = index
            target = index

            for _ in range(BOARD_SIZE):
                tile = self._grid[index]
                if tile is not None:
                    # ##: The slot just before the write cursor holds the last tile placed on this line.
                    shifted = target != line_start and self._merge(index, target - step)

                    if not shifted:
                        tile.state = TileState.STATIC
                        if index != target:
                            self._grid[target] = tile
                            self._grid[index] = None
                            shifted = True
                        target += step

                    moved |= shifted
                index += step

            index = (index + line_step + CELL_COUNT) % CELL_COUNT

        _logger.debug('Move %s: moved=%s score=%d', direction.name, moved, self._score)

        if moved:
            self.spawn_random_tile()
            self._over = is_done(self.values)
            if self._over:
                _logger.info('No move left, game over with score %d', self._score)
        return moved

    def get_tiles(self) -> TilesView:
        """
        Read-only view of the occupied cells, for rendering.

        Returns
        -------
        TilesView
            Iterable of ``(index, tile)`` pairs in index order; merged tiles appear twice (see ``TilesView``).
        """
        return TilesView(self._grid)

    def to_dict(self) -> dict[str, Any]:
        """
        Snapshot of the game as plain data.

        Returns
        -------
        dict[str, Any]
            JSON-compatible mapping with the grid, score and flags.
        """
        return {
            'grid': [
                None if tile is None else {'value': tile.value, 'state': tile.state.value, 'prev_pos': tile.prev_pos}
                for tile in self._grid
            ],
            'score': self._score,
            'over': self._over,
            'won': self._won,
            'generate_tiles': self._generate_tiles,
        }

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], rng: Generator | None = None, config: GameConfiguration | None = None
    ) -> 'GameState':
        """
        Restore a game from a snapshot produced by ``to_dict``.

        Parameters
        ----------
        data : dict[str, Any]
            The snapshot.
        rng : Generator, optional
            Random source for spawns.
        config : GameConfiguration, optional
            Rules of the game.

        Returns
        -------
        GameState
            The restored game.

        Raises
        ------
        ValueError
            If the snapshot is malformed.
        """
        try:
            grid = [None if cell is None else _tile_from_dict(cell) for cell in data['grid']]
            score = int(data['score'])
            over, won = bool(data['over']), bool(data['won'])
            generate_tiles = bool(data.get('generate_tiles', True))
        except (KeyError, TypeError, AttributeError) as error:
            raise ValueError(f'Malformed game snapshot: {error!r}') from error

        if score < 0:
            raise ValueError(f'Score must be non-negative, got {score}')

        state = cls(grid, generate_tiles=generate_tiles, rng=rng, config=config)
        state._score = score
        state._won = won
        state._over = over or state._over
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f'GameState(values={self.values}, score={self._score}, won={self._won}, over={self._over})'
