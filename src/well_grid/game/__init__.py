"""Game module for the well grid.

Exports the landing grid and supporting classes:
- WellGrid: Occupancy matrix with merge, line clearing and row compaction
- Block: Identity and color of an occupied cell
- PieceSnapshot: A landed piece handed over for merging
- TetrominoType: Enum of available piece types
- WellConfig: Well dimensions and column policy
"""

from .blocks import Block, decode_block, encode_block
from .config import WellConfig
from .grid import WellGrid, clear_lines, remove_row
from .pieces import BASE_SHAPES, COLORS, PieceSnapshot, TetrominoType

__all__ = [
    "WellGrid",
    "clear_lines",
    "remove_row",
    "Block",
    "encode_block",
    "decode_block",
    "WellConfig",
    "PieceSnapshot",
    "TetrominoType",
    "BASE_SHAPES",
    "COLORS",
]
