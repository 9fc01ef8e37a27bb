"""Square type and coordinate helpers.

Board layout (rank-major flat index ``rank * 8 + file``):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Rank 0 is White's back rank.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_WIDTH = 8
BOARD_HEIGHT = 8
BOARD_SIZE = BOARD_WIDTH * BOARD_HEIGHT


class Square(NamedTuple):
    """Coordinate pair ``(file, rank)``, both in ``[0, 8)`` when on the board."""

    file: int
    rank: int

    def to_index(self) -> int:
        """Flat index into a 64-slot board."""
        return self.rank * BOARD_WIDTH + self.file

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index % BOARD_WIDTH, index // BOARD_WIDTH)

    def offset(self, df: int, dr: int) -> Square:
        """Square shifted by ``(df, dr)``; may land off the board."""
        return Square(self.file + df, self.rank + dr)

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(sq: tuple[int, int]) -> bool:
    """Whether *sq* lies on the board. Never raises for integer pairs."""
    file_idx, rank_idx = sq
    return 0 <= file_idx < BOARD_WIDTH and 0 <= rank_idx < BOARD_HEIGHT


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 3) → 'e4'."""
    return chr(ord("a") + sq.file) + str(sq.rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ord(name[0]) - ord("a"), int(name[1]) - 1)


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(BOARD_SIZE))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
