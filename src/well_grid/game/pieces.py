from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


BASE_SHAPES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}

COLORS = {
    TetrominoType.I: "#3cc7d6",
    TetrominoType.O: "#fbb414",
    TetrominoType.T: "#b04497",
    TetrominoType.S: "#81b74a",
    TetrominoType.Z: "#ed652f",
    TetrominoType.J: "#3993d0",
    TetrominoType.L: "#e84138",
}


def as_shape(shape) -> Shape:
    """Coerce nested lists / arrays of flags to a 2D boolean array."""
    arr = np.asarray(shape, dtype=bool)
    if arr.size == 0:
        return arr.reshape(0, 0)
    if arr.ndim != 2:
        raise ValueError(f"Piece shape must be 2D, got {arr.ndim} dimension(s)")
    return arr


@dataclass(frozen=True, eq=False)
class PieceSnapshot:
    """A landed piece as handed over by whatever moves pieces around."""

    shape: Shape
    color: str
    x: int = 0
    y: int = 0

    @classmethod
    def from_kind(cls, kind: TetrominoType, x: int = 0, y: int = 0) -> "PieceSnapshot":
        return cls(shape=BASE_SHAPES[kind], color=COLORS[kind], x=x, y=y)

    def cells(self) -> List[Tuple[int, int]]:
        """Grid ``(row, col)`` of every occupied cell, row-major."""
        s = as_shape(self.shape)
        cells: List[Tuple[int, int]] = []
        for dy, dx in zip(*np.nonzero(s)):
            cells.append((self.y + int(dy), self.x + int(dx)))
        return cells
