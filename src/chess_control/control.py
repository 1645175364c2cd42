"""Square control and check detection for one side of a position.

analyze_control() makes a single pass over one color's pieces, marks every
square those pieces attack or defend, and classifies attacks on the opposing
king as single or double check. The result is an immutable ControlInfo; a
new one must be built after every board change.
"""

import logging
from dataclasses import dataclass

from chess_control.board import AugmentedBoard, PieceRef, PieceKind, validate_color
from chess_control.config import Settings
from chess_control.coords import Coords, coords_name, in_bounds
from chess_control.errors import InvalidArgument, InvariantViolation, PreconditionViolation
from chess_control.geometry import attack_candidates

__all__ = [
    "NoCheck",
    "SingleCheck",
    "DoubleCheck",
    "CheckState",
    "ControlInfo",
    "advance_check_state",
    "analyze_control",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoCheck:
    pass


@dataclass(frozen=True)
class SingleCheck:
    checking_piece: PieceRef
    checking_piece_coords: Coords
    king_coords: Coords


@dataclass(frozen=True)
class DoubleCheck:
    """Both checkers are dropped: the king has to move either way."""


CheckState = NoCheck | SingleCheck | DoubleCheck


def advance_check_state(
    state: CheckState,
    checking_piece: PieceRef,
    checking_piece_coords: Coords,
    king_coords: Coords,
) -> CheckState:
    """Apply one check event. A third check means the board is corrupt."""
    if isinstance(state, NoCheck):
        return SingleCheck(checking_piece, checking_piece_coords, king_coords)
    if isinstance(state, SingleCheck):
        return DoubleCheck()
    raise InvariantViolation("triple check is impossible")


@dataclass(frozen=True)
class ControlInfo:
    color: str  # "white" or "black", the side whose control this is
    control: tuple[tuple[bool, ...], ...]  # control[rank][file]
    check_state: CheckState

    def square_is_controlled(self, coords: Coords) -> bool:
        if not in_bounds(coords):
            raise InvalidArgument(f"Coordinates {coords} are off the board")
        return self.control[coords[0]][coords[1]]

    def controlled_coords(self) -> list[Coords]:
        return [(r, f) for r in range(8) for f in range(8) if self.control[r][f]]

    def has_king_in_single_check(self) -> bool:
        return isinstance(self.check_state, SingleCheck)

    def has_king_in_double_check(self) -> bool:
        return isinstance(self.check_state, DoubleCheck)

    def get_checking_piece(self) -> PieceRef:
        return self._single_check().checking_piece

    def get_checking_piece_coordinates(self) -> Coords:
        return self._single_check().checking_piece_coords

    def get_king_coordinates(self) -> Coords:
        return self._single_check().king_coords

    def _single_check(self) -> SingleCheck:
        if not isinstance(self.check_state, SingleCheck):
            raise PreconditionViolation(
                "Method can not be used unless the king is in a single check"
            )
        return self.check_state


def analyze_control(
    board: AugmentedBoard,
    color: str,
    settings: Settings | None = None,
) -> ControlInfo:
    """Build the control map and check state for every piece of `color`.

    Mark-square policy for each candidate square:
      - off the board: ignored
      - empty, or holding a piece of `color`: controlled
      - holding the opposing king: controlled, and a check event
      - holding any other opposing piece: nothing
    """
    if not isinstance(board, AugmentedBoard):
        raise InvalidArgument(
            f"analyze_control requires an AugmentedBoard, got {type(board).__name__}"
        )
    validate_color(color)
    trace = settings.trace_marks if settings is not None else False

    control = [[False] * 8 for _ in range(8)]
    state: CheckState = NoCheck()

    for element in board.piece_list(color):
        piece, piece_coords = element.piece, element.coords
        for coords in attack_candidates(board, piece, piece_coords):
            if not in_bounds(coords):
                continue

            occupant = None if board.is_empty_square(coords) else board.get_piece(coords)
            if occupant is None or occupant.color == color:
                # Own pieces count: a king can't take a protected piece
                control[coords[0]][coords[1]] = True
            elif occupant.kind is PieceKind.KING:
                control[coords[0]][coords[1]] = True
                try:
                    state = advance_check_state(state, piece, piece_coords, coords)
                except InvariantViolation:
                    logger.error("Third check on %s in %s", coords_name(coords), board.fen())
                    raise
                logger.debug(
                    "%s %s on %s checks king on %s -> %s",
                    color, piece.kind.value, coords_name(piece_coords),
                    coords_name(coords), type(state).__name__,
                )
            else:
                if trace:
                    logger.debug(
                        "%s on %s attacks %s on %s (not controlled)",
                        piece.symbol(), coords_name(piece_coords),
                        occupant.symbol(), coords_name(coords),
                    )
                continue

            if trace:
                logger.debug(
                    "%s on %s controls %s",
                    piece.symbol(), coords_name(piece_coords), coords_name(coords),
                )

    return ControlInfo(
        color=color,
        control=tuple(tuple(row) for row in control),
        check_state=state,
    )
