"""
Tiles, their visual annotation and the four move directions.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class TileState(str, Enum):
    """
    Visual annotation of a tile after the last move.

    NEW: spawned after the last move.
    STATIC: slid (or stayed) during the last move.
    MERGED: produced by a merge during the last move.
    """

    NEW = 'new'
    STATIC = 'static'
    MERGED = 'merged'


@dataclass(eq=False)
class Tile:
    """
    A numbered occupant of one board cell.

    Attributes
    ----------
    value : int
        Power of two, at least 2.
    state : TileState
        Annotation left by the last move.
    prev_pos : int | None
        Cell index the tile occupied before the last move, if it existed then.

    Notes
    -----
    Two tiles are equal when their values are equal; annotation and previous position are ignored.
    """

    value: int
    state: TileState = TileState.NEW
    prev_pos: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.value == other.value

    def update(self, value: int, state: TileState):
        """Set value and annotation in one go."""
        self.value = value
        self.state = state

    @property
    def style(self) -> str:
        """
        Presentation class derived from the annotation.

        Returns
        -------
        str
            ``'tile-new'``, ``'tile-merged'`` or an empty string for static tiles.
        """
        if self.state is TileState.NEW:
            return 'tile-new'
        if self.state is TileState.MERGED:
            return 'tile-merged'
        return ''


# ##>: (start index, step inside a line, step between lines) per direction.
_INCREMENTS: dict[int, tuple[int, int, int]] = {
    0: (0, 1, 0),
    1: (0, 4, 1),
    2: (15, -1, 0),
    3: (15, -4, -1),
}


class Direction(IntEnum):
    """Move directions, numbered like the action ids (0: left, 1: up, 2: right, 3: down)."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def increment(self) -> tuple[int, int, int]:
        """
        Stride triple describing the scan order of the direction.

        Returns
        -------
        tuple[int, int, int]
            The index of the first cell scanned, the step between two cells of a line, and the extra offset
            applied (modulo 16) to move from the end of one line to the start of the next.

        Notes
        -----
        Lines are scanned from the edge the tiles slide towards.
        """
        return _INCREMENTS[self.value]

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Parse a direction name.

        Parameters
        ----------
        name : str
            One of ``left``, ``up``, ``right``, ``down`` (case insensitive).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name is not a direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Invalid direction: {name!r}. Must be left, up, right or down') from None
