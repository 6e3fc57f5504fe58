"""Wheel board data models and the per-tick transition rule."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


DEFAULT_THRESHOLD = 6


class TileKind(str, Enum):
    """Tile kind enumeration."""
    LATENT = "latent"  # value = ticks until activation
    ACTIVE = "active"  # value = current strength
    DEAD = "dead"


@dataclass(frozen=True)
class Tile:
    """State of a single wheel region."""
    kind: TileKind
    value: int = 0

    @classmethod
    def latent(cls, countdown: int) -> "Tile":
        return cls(TileKind.LATENT, countdown)

    @classmethod
    def active(cls, strength: int) -> "Tile":
        return cls(TileKind.ACTIVE, strength)

    @property
    def is_dead(self) -> bool:
        return self.kind == TileKind.DEAD

    def advance(self, threshold: int = DEFAULT_THRESHOLD) -> "Tile":
        """Return this tile one tick later."""
        if self.kind == TileKind.LATENT:
            if self.value == 0:
                return Tile(TileKind.ACTIVE, 1)
            return Tile(TileKind.LATENT, self.value - 1)
        if self.kind == TileKind.ACTIVE:
            if self.value < threshold:
                return Tile(TileKind.ACTIVE, self.value + 1)
            return DEAD
        return self

    def to_symbol(self) -> str:
        """Render the tile the way boards are shown in logs and responses."""
        if self.kind == TileKind.LATENT and self.value <= 9:
            return str(self.value)
        if self.kind == TileKind.LATENT:
            return f"L{self.value}"
        if self.kind == TileKind.ACTIVE:
            return f"A{self.value}"
        return "-"


DEAD = Tile(TileKind.DEAD)

# Boards are immutable tuples so they can be hashed into search keys
Board = Tuple[Tile, ...]


def parse_board(text: str) -> Board:
    """
    Parse a board line, one character per region read clockwise from region 0.

    Decimal digits become Latent tiles with that countdown; every other
    character is a Dead tile.

    Args:
        text: Board line without its line terminator.

    Returns:
        Parsed board.
    """
    tiles: List[Tile] = []
    for char in text:
        if char.isdigit() and char.isascii():
            tiles.append(Tile.latent(int(char)))
        else:
            tiles.append(DEAD)
    return tuple(tiles)


def format_board(board: Iterable[Tile]) -> str:
    """Render a board as space-separated tile symbols."""
    return " ".join(tile.to_symbol() for tile in board)


def advance_tick(board: Board, threshold: int = DEFAULT_THRESHOLD) -> Board:
    """Apply one tick to every tile independently."""
    return tuple(tile.advance(threshold) for tile in board)


def is_cleared(board: Iterable[Tile]) -> bool:
    """Check whether every tile is dead (vacuously true for an empty board)."""
    return all(tile.is_dead for tile in board)


def ticks_to_clear(board: Board, threshold: int = DEFAULT_THRESHOLD) -> int:
    """Upper bound on the ticks needed before the board clears on its own."""
    countdowns = [tile.value for tile in board if tile.kind == TileKind.LATENT]
    return max(countdowns, default=0) + threshold + 1
