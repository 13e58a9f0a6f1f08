"""
Move legality on a board of tile values, used to detect the end of a game.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import asarray, ndarray

from tilegrid.config import BOARD_SIZE
from tilegrid.core.tile import Direction


def _as_board(values) -> ndarray:
    """Reshape a flat or square sequence of values into a square matrix."""
    return asarray(values).reshape(BOARD_SIZE, BOARD_SIZE)


def legal_actions_mask(values) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    values : array_like
        Tile values, either 16 cells in row-major order or a 4x4 matrix. Empty cells are 0.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    A direction is legal when a tile has an empty neighbour, or an equal neighbour, on the side it slides to.
    """
    board = _as_board(values)

    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(values) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    values : array_like
        Tile values, flat or 4x4, 0 for empty cells.

    Returns
    -------
    list[Direction]
        Legal directions in action order.
    """
    mask = legal_actions_mask(values)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(values) -> list[Direction]:
    """
    Directions that would leave the board unchanged.

    Parameters
    ----------
    values : array_like
        Tile values, flat or 4x4, 0 for empty cells.

    Returns
    -------
    list[Direction]
        Illegal directions in action order.
    """
    mask = legal_actions_mask(values)
    return [direction for direction in Direction if not mask[direction]]


def is_done(values) -> bool:
    """
    Check if no move is possible anymore.

    Parameters
    ----------
    values : array_like
        Tile values, flat or 4x4, 0 for empty cells.

    Returns
    -------
    bool
        True when the board is full and no two orthogonally adjacent tiles are equal.
    """
    board = _as_board(values)
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )
