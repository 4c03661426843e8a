"""Landing-surface grid of a falling-block puzzle game."""

from .game import Block, PieceSnapshot, TetrominoType, WellConfig, WellGrid

__all__ = ["WellGrid", "WellConfig", "Block", "PieceSnapshot", "TetrominoType"]
