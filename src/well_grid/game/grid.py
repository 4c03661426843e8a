from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .blocks import Block
from .config import WellConfig
from .pieces import PieceSnapshot

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


class WellGrid:
    """Isolated matrix for the pieces that landed inside the well.

    Cells are kept in two parallel arrays: ``block_ids`` holds 0 for empty
    cells and the block identity otherwise, ``colors`` holds the color token
    of the piece that placed the cell (``None`` when empty). Row 0 is the top.
    """

    def __init__(self, rows: int = 20, cols: int = 10, column_policy: str = "drop") -> None:
        self.config = WellConfig(rows=rows, cols=cols, column_policy=column_policy)
        self.rows = self.config.rows
        self.cols = self.config.cols
        self.block_ids = np.zeros((self.rows, self.cols), dtype=np.int64)
        self.colors = np.full((self.rows, self.cols), None, dtype=object)
        self._block_count = 0

    @classmethod
    def from_config(cls, config: WellConfig) -> "WellGrid":
        return cls(rows=config.rows, cols=config.cols, column_policy=config.column_policy)

    @property
    def block_count(self) -> int:
        """Identity of the last block written, 0 on a fresh or reset grid."""
        return self._block_count

    def reset(self) -> None:
        self.block_ids.fill(0)
        self.colors.fill(None)
        self._block_count = 0

    def merge(self, piece_shape, piece_color: str, offset: Offset) -> int:
        """Transfer a landed piece's cells into the grid and clear lines.

        ``offset`` is the ``(x, y)`` of the piece's top-left corner. Cells whose
        row falls outside the well are dropped: when the well is full a piece
        lands before it has entered from the top. Returns the number of lines
        cleared by the landing.
        """
        x, y = int(offset[0]), int(offset[1])
        return self.merge_piece(PieceSnapshot(shape=piece_shape, color=piece_color, x=x, y=y))

    def merge_piece(self, piece: PieceSnapshot) -> int:
        targets: List[Tuple[int, int]] = []
        for row, col in piece.cells():
            if not 0 <= col < self.cols:
                if self.config.column_policy == "raise":
                    raise ValueError(f"Piece cell at column {col} is outside the well (0..{self.cols - 1})")
                logger.debug("Dropping piece cell outside the well columns at (%d, %d)", row, col)
                continue
            if not 0 <= row < self.rows:
                logger.debug("Dropping piece cell outside the well rows at (%d, %d)", row, col)
                continue
            targets.append((row, col))

        for row, col in targets:
            self._block_count += 1
            self.block_ids[row, col] = self._block_count
            self.colors[row, col] = piece.color

        return self.clear_lines()

    def is_row_complete(self, row: int) -> bool:
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} outside the well (0..{self.rows - 1})")
        return bool(np.all(self.block_ids[row] != 0))

    def clear_lines(self) -> int:
        """Remove every complete row, bottom to top, pulling rows above down.

        After a row is removed the row above has moved into the same index,
        so that index is checked again before the scan moves up.
        """
        lines_cleared = 0
        row = self.rows - 1
        while row >= 0:
            if self.is_row_complete(row):
                self.remove_row(row)
                lines_cleared += 1
                continue
            row -= 1
        if lines_cleared:
            logger.debug("Cleared %d line(s)", lines_cleared)
        return lines_cleared

    def remove_row(self, row_index: int) -> None:
        """Remove a row by descending all rows above, overriding it."""
        if not 0 <= row_index < self.rows:
            raise IndexError(f"Row {row_index} outside the well (0..{self.rows - 1})")
        self.block_ids[1 : row_index + 1] = self.block_ids[:row_index].copy()
        self.colors[1 : row_index + 1] = self.colors[:row_index].copy()
        self.block_ids[0] = 0
        self.colors[0] = None

    def cell(self, row: int, col: int) -> Optional[Block]:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) outside the well")
        block_id = int(self.block_ids[row, col])
        if block_id == 0:
            return None
        return Block(block_id=block_id, color=self.colors[row, col])

    def blocks(self) -> Iterator[Tuple[int, int, Block]]:
        for row, col in zip(*np.nonzero(self.block_ids)):
            row, col = int(row), int(col)
            yield row, col, Block(block_id=int(self.block_ids[row, col]), color=self.colors[row, col])

    def snapshot(self) -> List[List[Optional[Block]]]:
        return [[self.cell(row, col) for col in range(self.cols)] for row in range(self.rows)]

    def occupancy(self) -> np.ndarray:
        return self.block_ids != 0

    def clone_state(self) -> np.ndarray:
        return self.block_ids.copy()


def clear_lines(grid: WellGrid) -> int:
    return grid.clear_lines()


def remove_row(grid: WellGrid, row_index: int) -> None:
    grid.remove_row(row_index)
