from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from well_grid.game import PieceSnapshot, TetrominoType, WellConfig, WellGrid
from well_grid.game.config import COLUMN_POLICIES
from well_grid.visualization import print_grid

logger = logging.getLogger(__name__)


def parse_piece(text: str) -> PieceSnapshot:
    """Parse ``KIND@X,Y`` (e.g. ``I@0,19``) into a catalogue piece."""
    kind_name, sep, position = text.partition("@")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KIND@X,Y, got {text!r}")
    try:
        kind = TetrominoType[kind_name.strip().upper()]
    except KeyError:
        names = ", ".join(t.name for t in TetrominoType)
        raise argparse.ArgumentTypeError(f"unknown piece {kind_name!r} (choose from {names})")
    try:
        x_text, y_text = position.split(",")
        x, y = int(x_text), int(y_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad position {position!r}, expected X,Y")
    return PieceSnapshot.from_kind(kind, x=x, y=y)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="well-grid",
        description="Merge landed pieces into a well and report cleared lines.",
    )
    p.add_argument("--rows", type=int, default=WellConfig.rows)
    p.add_argument("--cols", type=int, default=WellConfig.cols)
    p.add_argument("--column-policy", choices=COLUMN_POLICIES, default=WellConfig.column_policy)
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("pieces", nargs="+", type=parse_piece, metavar="KIND@X,Y")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = WellConfig(rows=args.rows, cols=args.cols, column_policy=args.column_policy)
    except ValueError as exc:
        parser.error(str(exc))
    grid = WellGrid.from_config(config)

    total = 0
    for index, piece in enumerate(args.pieces):
        try:
            lines = grid.merge_piece(piece)
        except ValueError as exc:
            logger.error("Piece %d rejected: %s", index, exc)
            return 1
        total += lines
        print(f"piece {index}: {piece.x},{piece.y} -> {lines} line(s) cleared")

    print_grid(grid)
    print(f"Total lines cleared: {total}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
