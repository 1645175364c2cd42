"""Absolute pin detection by ray walking.

A piece is absolutely pinned when it is the first piece a slider meets along
one of its rays and the second piece on that ray is the pinned piece's own
king. Pins are stored on the board's PieceRefs and only read back by the
verification harness; control analysis never consults them.
"""

from dataclasses import dataclass

import chess

from chess_control.coords import DIAGONAL_STEPS, ORTHOGONAL_STEPS, Coords, from_square, ray, to_square

__all__ = [
    "PinRecord",
    "RAY_STEPS",
    "first_two_hits",
    "find_pins",
]

RAY_STEPS: dict[chess.PieceType, tuple[tuple[int, int], ...]] = {
    chess.BISHOP: DIAGONAL_STEPS,
    chess.ROOK: ORTHOGONAL_STEPS,
    chess.QUEEN: DIAGONAL_STEPS + ORTHOGONAL_STEPS,
}


@dataclass(frozen=True)
class PinRecord:
    pinned: Coords
    pinner: Coords


def first_two_hits(
    board: chess.Board,
    start: Coords,
    step: tuple[int, int],
) -> tuple[Coords | None, Coords | None]:
    """The first two occupied squares along a ray, None where the ray runs out."""
    hits: list[Coords] = []
    for coords in ray(start, step):
        if board.piece_at(to_square(coords)) is None:
            continue
        hits.append(coords)
        if len(hits) == 2:
            return hits[0], hits[1]
    return (hits[0] if hits else None), None


def find_pins(board: chess.Board) -> list[PinRecord]:
    """Every absolute pin on the board, for both colors."""
    pins: list[PinRecord] = []

    for color in (chess.WHITE, chess.BLACK):
        enemy = not color
        for pt, steps in RAY_STEPS.items():
            for slider_sq in board.pieces(pt, color):
                slider = from_square(slider_sq)
                for step in steps:
                    first, second = first_two_hits(board, slider, step)
                    if second is None:
                        continue

                    blocker = board.piece_at(to_square(first))
                    behind = board.piece_at(to_square(second))
                    if blocker.color == enemy and behind.color == enemy and behind.piece_type == chess.KING:
                        pins.append(PinRecord(pinned=first, pinner=slider))

    return pins
