"""Attack geometry for the six piece kinds.

Offsets and ray steps are (d_rank, d_file), the same order as Coords.
Leapers (pawn, knight, king) produce a fixed set of candidates which may lie
off the board; the caller drops those. Sliders (bishop, rook, queen) walk
each ray until they leave the board or hit an occupied square, which is
still yielded.
"""

from dataclasses import dataclass
from typing import Iterator

from chess_control.board import AugmentedBoard, PieceKind, PieceRef
from chess_control.coords import DIAGONAL_STEPS, ORTHOGONAL_STEPS, Coords, add_offset, ray

__all__ = [
    "Leaper",
    "Slider",
    "GEOMETRY",
    "PAWN_ATTACKS",
    "pattern_for",
    "attack_candidates",
]


@dataclass(frozen=True)
class Leaper:
    offsets: tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class Slider:
    steps: tuple[tuple[int, int], ...]


AttackPattern = Leaper | Slider

PAWN_ATTACKS: dict[str, Leaper] = {
    "white": Leaper(((1, 1), (1, -1))),
    "black": Leaper(((-1, 1), (-1, -1))),
}

# Pawns are keyed by color as well.
GEOMETRY: dict[PieceKind, AttackPattern | dict[str, Leaper]] = {
    PieceKind.PAWN: PAWN_ATTACKS,
    PieceKind.KNIGHT: Leaper((
        (1, 2), (2, 1), (2, -1), (1, -2),
        (-1, -2), (-2, -1), (-2, 1), (-1, 2),
    )),
    PieceKind.BISHOP: Slider(DIAGONAL_STEPS),
    PieceKind.ROOK: Slider(ORTHOGONAL_STEPS),
    PieceKind.QUEEN: Slider(DIAGONAL_STEPS + ORTHOGONAL_STEPS),
    PieceKind.KING: Leaper(DIAGONAL_STEPS + ORTHOGONAL_STEPS),
}


def pattern_for(piece: PieceRef) -> AttackPattern:
    pattern = GEOMETRY[piece.kind]
    if isinstance(pattern, dict):
        return pattern[piece.color]
    return pattern


def _slide(board: AugmentedBoard, start: Coords, step: tuple[int, int]) -> Iterator[Coords]:
    for coords in ray(start, step):
        yield coords
        if not board.is_empty_square(coords):
            return


def attack_candidates(board: AugmentedBoard, piece: PieceRef, coords: Coords) -> Iterator[Coords]:
    """Yield every square the piece on coords attacks or defends."""
    pattern = pattern_for(piece)
    if isinstance(pattern, Leaper):
        for diff in pattern.offsets:
            yield add_offset(coords, diff)
    else:
        for step in pattern.steps:
            yield from _slide(board, coords, step)
