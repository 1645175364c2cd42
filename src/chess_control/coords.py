"""Board coordinates: (rank, file) pairs and conversions to python-chess squares."""

from typing import Iterator

import chess

__all__ = [
    "Coords",
    "in_bounds",
    "add_offset",
    "DIAGONAL_STEPS",
    "ORTHOGONAL_STEPS",
    "ray",
    "to_square",
    "from_square",
    "parse_coords",
    "coords_name",
]

# (rank, file), both 0..7. a1 = (0, 0), a8 = (7, 0), h1 = (0, 7).
Coords = tuple[int, int]


def in_bounds(coords: Coords) -> bool:
    return 0 <= coords[0] <= 7 and 0 <= coords[1] <= 7


def add_offset(coords: Coords, diff: tuple[int, int]) -> Coords:
    return (coords[0] + diff[0], coords[1] + diff[1])


# (d_rank, d_file) steps for sliding pieces
DIAGONAL_STEPS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ORTHOGONAL_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def ray(start: Coords, step: tuple[int, int]) -> Iterator[Coords]:
    """Every on-board square from start (exclusive) to the edge along step."""
    coords = add_offset(start, step)
    while in_bounds(coords):
        yield coords
        coords = add_offset(coords, step)


def to_square(coords: Coords) -> chess.Square:
    return chess.square(coords[1], coords[0])


def from_square(sq: chess.Square) -> Coords:
    return (chess.square_rank(sq), chess.square_file(sq))


def parse_coords(name: str) -> Coords:
    """'e4' -> (3, 4). Raises ValueError for anything that is not a square name."""
    return from_square(chess.parse_square(name))


def coords_name(coords: Coords) -> str:
    """(3, 4) -> 'e4'."""
    return chess.square_name(to_square(coords))
