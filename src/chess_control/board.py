"""Read-only board snapshot consumed by control analysis.

AugmentedBoard wraps a copy of a chess.Board and hands out PieceRef handles
with stable ids, per-color piece lists yielding (piece, coords) pairs, and
absolute pin data computed once at construction.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterator

import chess

from chess_control.coords import Coords, from_square, in_bounds, to_square
from chess_control.errors import InvalidArgument
from chess_control.pins import find_pins

__all__ = [
    "COLORS",
    "PieceKind",
    "PieceRef",
    "PieceElement",
    "AugmentedBoard",
    "color_name",
    "validate_color",
]

COLORS = ("white", "black")


class PieceKind(enum.Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"

    @classmethod
    def from_piece_type(cls, piece_type: chess.PieceType) -> "PieceKind":
        return _KIND_BY_TYPE[piece_type]

    @property
    def piece_type(self) -> chess.PieceType:
        return _TYPE_BY_KIND[self]


_KIND_BY_TYPE = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}
_TYPE_BY_KIND = {kind: pt for pt, kind in _KIND_BY_TYPE.items()}


def color_name(color: chess.Color) -> str:
    """Convert chess.Color bool to lowercase string."""
    return "white" if color == chess.WHITE else "black"


def validate_color(color: object) -> str:
    if color not in COLORS:
        raise InvalidArgument(f"Invalid color argument {color!r} supplied")
    return color


@dataclass(eq=False)
class PieceRef:
    """Handle to a piece owned by an AugmentedBoard. Compared by identity."""
    id: int
    kind: PieceKind
    color: str  # "white" or "black"
    pinning_piece: "PieceRef | None" = field(default=None, repr=False)
    pin_origin: Coords | None = None  # coords of pinning_piece

    @property
    def is_pinned(self) -> bool:
        return self.pinning_piece is not None

    def symbol(self) -> str:
        return chess.Piece(self.kind.piece_type, self.color == "white").symbol()


@dataclass(frozen=True)
class PieceElement:
    piece: PieceRef
    coords: Coords


class AugmentedBoard:
    """Immutable snapshot of a chess.Board.

    The wrapped board is copied, so moves pushed on the caller's board later
    do not change this snapshot. Build a new AugmentedBoard (and a new
    analysis) after every move.
    """

    def __init__(self, board: chess.Board):
        if not isinstance(board, chess.Board):
            raise InvalidArgument(
                f"AugmentedBoard requires a chess.Board, got {type(board).__name__}"
            )
        self._board = board.copy(stack=False)
        self._pieces: dict[chess.Square, PieceRef] = {}

        for piece_id, (sq, piece) in enumerate(sorted(self._board.piece_map().items())):
            self._pieces[sq] = PieceRef(
                id=piece_id,
                kind=PieceKind.from_piece_type(piece.piece_type),
                color=color_name(piece.color),
            )

        for pin in find_pins(self._board):
            pinned = self._pieces[to_square(pin.pinned)]
            pinned.pinning_piece = self._pieces[to_square(pin.pinner)]
            pinned.pin_origin = pin.pinner

    @classmethod
    def from_fen(cls, fen: str) -> "AugmentedBoard":
        try:
            board = chess.Board(fen)
        except ValueError as e:
            raise InvalidArgument(f"Invalid FEN: {fen}") from e
        return cls(board)

    def fen(self) -> str:
        return self._board.fen()

    def is_empty_square(self, coords: Coords) -> bool:
        return to_square(self._check_coords(coords)) not in self._pieces

    def get_piece(self, coords: Coords) -> PieceRef:
        sq = to_square(self._check_coords(coords))
        if sq not in self._pieces:
            raise InvalidArgument(f"No piece at {chess.square_name(sq)}")
        return self._pieces[sq]

    def piece_list(self, color: str) -> Iterator[PieceElement]:
        """Yield every piece of one color exactly once, in square order."""
        validate_color(color)
        for sq, piece in self._pieces.items():
            if piece.color == color:
                yield PieceElement(piece=piece, coords=from_square(sq))

    def white_piece_list(self) -> Iterator[PieceElement]:
        return self.piece_list("white")

    def black_piece_list(self) -> Iterator[PieceElement]:
        return self.piece_list("black")

    @staticmethod
    def _check_coords(coords: Coords) -> Coords:
        if not in_bounds(coords):
            raise InvalidArgument(f"Coordinates {coords} are off the board")
        return coords
