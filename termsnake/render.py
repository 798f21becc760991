"""
Render contract between the engine and whatever draws the game.

The engine never draws anything itself. It hands a Renderer either the
whole frame (once at startup) or the handful of cells that changed during a
tick. The terminal driver is the production Renderer; tests use a
recording one.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class CellUpdate:
    row: int
    col: int
    symbol: bytes


class Renderer:
    """
    Base class/interface for anything that can display a frame.

    Coordinates passed to render_cell are screen positions, which match the
    board's (row, col) because the frame is drawn from the top-left corner.
    """

    def render_full(self, frame: bytes) -> None:
        raise NotImplementedError

    def render_cell(self, symbol: bytes, col: int, row: int) -> None:
        raise NotImplementedError

    def render_status(self, text: str) -> None:
        raise NotImplementedError

    def render_changes(self, changes: List[CellUpdate]) -> None:
        """Push a tick's cell deltas, in order."""
        for change in changes:
            self.render_cell(change.symbol, change.col, change.row)


class RecordingRenderer(Renderer):
    """
    Renderer that keeps everything it was asked to draw, for the tests.
    """

    def __init__(self):
        self.frames: List[bytes] = []
        self.cells: List[CellUpdate] = []
        self.statuses: List[str] = []

    def render_full(self, frame: bytes) -> None:
        self.frames.append(frame)

    def render_cell(self, symbol: bytes, col: int, row: int) -> None:
        self.cells.append(CellUpdate(row=row, col=col, symbol=symbol))

    def render_status(self, text: str) -> None:
        self.statuses.append(text)
