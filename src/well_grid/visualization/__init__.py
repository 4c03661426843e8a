"""Plain-text views of a well grid."""

from .text import format_grid, print_grid

__all__ = ["format_grid", "print_grid"]
