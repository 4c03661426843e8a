from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Block:
    """An occupied well cell: a unique identity plus the color of its piece.

    The identity stays with the block when rows shift down during a line
    clear, so a renderer can key its drawing on it and animate the fall.
    """

    block_id: int
    color: str

    @property
    def key(self) -> str:
        return str(self.block_id)


def encode_block(block: Block) -> str:
    """Compact ``"<id><color>"`` form, e.g. ``"12#3cc7d6"``.

    Only ``#``-prefixed color strings have this form; anything else raises
    ``ValueError`` since it could not be split back apart.
    """
    if not isinstance(block.color, str) or not block.color.startswith("#") or len(block.color) < 2:
        raise ValueError(f"Block color {block.color!r} is not a '#'-prefixed color")
    return f"{block.block_id}{block.color}"


def decode_block(value: str) -> Block:
    head, sep, tail = value.partition("#")
    if not sep or not head.isdigit() or not tail:
        raise ValueError(f"Malformed block value: {value!r}")
    return Block(block_id=int(head), color="#" + tail)
