"""
Board entity - the playfield as a flat character buffer.

The buffer holds exactly the bytes written to the terminal: one border
cell on each side of every row followed by a CRLF terminator, and a border
row above and below the playfield. Cell (row, col) lives at
``row * row_stride + col``, so the whole frame can be pushed to the screen
as a single blob.

    ############\\r\\n
    #          #\\r\\n
    #    @     #\\r\\n
    ############\\r\\n
"""

from typing import Dict, Tuple

import numpy as np

from .constants import BORDER_WIDTH, LINE_TERMINATOR, CellKind
from termsnake.errors import InvariantViolation

Coordinate = Tuple[int, int]

_KIND_BY_BYTE: Dict[int, CellKind] = {kind.value: kind for kind in CellKind}


class Board:
    """
    A width x height playfield surrounded by a border.

    Attributes:
        width, height: size of the playable interior
        row_stride: bytes per buffer row, border and terminator included
        rows: number of buffer rows, border rows included
        buffer: flat numpy uint8 array, mutated in place
    """

    def __init__(self, width: int, height: int):
        self.width = 0
        self.height = 0
        self.row_stride = 0
        self.rows = 0
        self.buffer = np.zeros(0, dtype=np.uint8)
        self.initialize(width, height)

    def initialize(self, width: int, height: int) -> None:
        """
        Allocate (or reset) the buffer and stamp the border and terminators.

        Every interior cell starts out EMPTY. Dimensions are validated by the
        caller before the board is built.
        """
        self.width = width
        self.height = height
        self.row_stride = width + 2 * BORDER_WIDTH + len(LINE_TERMINATOR)
        self.rows = height + 2 * BORDER_WIDTH

        grid = np.full((self.rows, self.row_stride), CellKind.EMPTY.value, dtype=np.uint8)

        last_col = width + BORDER_WIDTH
        grid[0, : last_col + 1] = CellKind.BORDER.value
        grid[-1, : last_col + 1] = CellKind.BORDER.value
        grid[:, 0] = CellKind.BORDER.value
        grid[:, last_col] = CellKind.BORDER.value
        grid[:, last_col + 1 :] = np.frombuffer(LINE_TERMINATOR, dtype=np.uint8)

        self.buffer = grid.reshape(-1)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col <= self.width + BORDER_WIDTH):
            raise InvariantViolation(
                f"cell ({row}, {col}) is outside the {self.width}x{self.height} board"
            )

    def index_of(self, row: int, col: int) -> int:
        self._check_bounds(row, col)
        return row * self.row_stride + col

    def coordinate_of(self, index: int) -> Coordinate:
        row, col = divmod(int(index), self.row_stride)
        return (row, col)

    def cell_at(self, row: int, col: int) -> CellKind:
        """
        Read the kind of a single cell.

        Raises:
            InvariantViolation: If (row, col) is off the board or holds a
                byte that is not a cell kind.
        """
        value = int(self.buffer[self.index_of(row, col)])
        try:
            return _KIND_BY_BYTE[value]
        except KeyError:
            raise InvariantViolation(
                f"cell ({row}, {col}) holds unrecognized byte {value!r}"
            ) from None

    def set_cell(self, row: int, col: int, kind: CellKind) -> None:
        self.buffer[self.index_of(row, col)] = kind.value

    def center(self) -> Coordinate:
        """Return the interior cell the snake starts on."""
        return (self.height // 2 + BORDER_WIDTH, self.width // 2 + BORDER_WIDTH)

    def free_count(self) -> int:
        return int(np.count_nonzero(self.buffer == CellKind.EMPTY.value))

    def frame(self) -> bytes:
        """Return a read-only copy of the buffer, ready to write to a terminal."""
        return self.buffer.tobytes()

    def __repr__(self):
        return f"<Board {self.width}x{self.height}, free={self.free_count()}>"
