from __future__ import annotations

from dataclasses import dataclass

COLUMN_POLICIES = ("drop", "raise")


@dataclass
class WellConfig:
    """Configuration for a well grid.

    ``column_policy`` decides what happens to piece cells that land left or
    right of the well: ``"drop"`` ignores them like cells above the top,
    ``"raise"`` rejects the whole merge with ``ValueError``.
    """
    rows: int = 20
    cols: int = 10
    column_policy: str = "drop"

    def __post_init__(self) -> None:
        self.rows = int(self.rows)
        self.cols = int(self.cols)
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Well dimensions must be positive, got {self.rows}x{self.cols}")
        if self.column_policy not in COLUMN_POLICIES:
            raise ValueError(
                f"Unknown column policy {self.column_policy!r}, expected one of {COLUMN_POLICIES}"
            )
