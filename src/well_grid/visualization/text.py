from __future__ import annotations

from well_grid.game.grid import WellGrid


def format_grid(grid: WellGrid, filled: str = "█", empty: str = "·") -> str:
    lines = []
    for row in grid.occupancy():
        lines.append("".join([filled if cell else empty for cell in row]))
    return "\n".join(lines)


def print_grid(grid: WellGrid) -> None:
    print(format_grid(grid))
