"""
Food placement.
"""

import random
from typing import Optional, Tuple

import numpy as np

from .board import Board
from .constants import CellKind
from termsnake.errors import BoardFullError


def spawn(board: Board, rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Pick a uniformly random free cell on the board.

    Counts the EMPTY cells, draws a rank in [0, k) and returns the cell
    holding that rank in a single scan of the buffer. The caller stamps the
    food; this function does not modify the board.

    Args:
        board: The board to place food on
        rng: Random source, defaults to the module-level generator

    Returns:
        (row, col) of the chosen cell.

    Raises:
        BoardFullError: If no cell is free.
    """
    free = np.flatnonzero(board.buffer == CellKind.EMPTY.value)
    if free.size == 0:
        raise BoardFullError(
            f"no free cell left on the {board.width}x{board.height} board for food"
        )
    rank = (rng or random).randrange(free.size)
    return board.coordinate_of(free[rank])
