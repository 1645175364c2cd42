"""Assertions for tests: compare a ControlInfo against expected state.

expect_state() raises VerificationMismatch on the first difference, naming
the offending coordinate or field.
"""

from dataclasses import dataclass
from typing import Iterable

from chess_control.board import AugmentedBoard
from chess_control.control import ControlInfo, SingleCheck
from chess_control.coords import Coords, coords_name, in_bounds
from chess_control.errors import VerificationMismatch

__all__ = [
    "ExpectedCheck",
    "ExpectedPin",
    "expect_state",
]


@dataclass
class ExpectedCheck:
    has_king_in_single_check: bool = False
    has_king_in_double_check: bool = False
    # Must stay None unless the position is in single check
    checking_piece_id: int | None = None
    checking_piece_coordinates: Coords | None = None
    king_coordinates: Coords | None = None


@dataclass
class ExpectedPin:
    origin: Coords    # pinning piece
    location: Coords  # pinned piece


def _expect_control(info: ControlInfo, controlled: Iterable[Coords]) -> None:
    addressed = [[False] * 8 for _ in range(8)]

    for coords in controlled:
        if not in_bounds(coords):
            raise VerificationMismatch(
                f"Expected controlled square {coords} is off the board",
                coords=coords,
            )
        if not info.square_is_controlled(coords):
            raise VerificationMismatch(
                f"Control boards do not match at {coords_name(coords)} (expected controlled)",
                coords=coords,
            )
        addressed[coords[0]][coords[1]] = True

    for r in range(8):
        for f in range(8):
            if not addressed[r][f] and info.control[r][f]:
                raise VerificationMismatch(
                    f"Control boards do not match at {coords_name((r, f))} (unexpectedly controlled)",
                    coords=(r, f),
                )


def _expect_check(info: ControlInfo, check: ExpectedCheck) -> None:
    if check.has_king_in_single_check != info.has_king_in_single_check():
        raise VerificationMismatch(
            "has_king_in_single_check does not match", field="has_king_in_single_check",
        )
    if check.has_king_in_double_check != info.has_king_in_double_check():
        raise VerificationMismatch(
            "has_king_in_double_check does not match", field="has_king_in_double_check",
        )
    if not isinstance(info.check_state, SingleCheck):
        for name in ("checking_piece_id", "checking_piece_coordinates", "king_coordinates"):
            if getattr(check, name) is not None:
                raise VerificationMismatch(
                    f"{name} expected but the king is not in single check", field=name,
                )
        return

    state = info.check_state
    if check.checking_piece_id != state.checking_piece.id:
        raise VerificationMismatch(
            f"Checking piece does not match: expected id {check.checking_piece_id}, "
            f"got {state.checking_piece.id}",
            field="checking_piece",
        )
    if check.checking_piece_coordinates != state.checking_piece_coords:
        raise VerificationMismatch(
            "Coordinates for checking piece do not match",
            field="checking_piece_coordinates", coords=state.checking_piece_coords,
        )
    if check.king_coordinates != state.king_coords:
        raise VerificationMismatch(
            "Coordinates for the king do not match",
            field="king_coordinates", coords=state.king_coords,
        )


def _expect_pins(board: AugmentedBoard, pins: Iterable[ExpectedPin]) -> None:
    for pin in pins:
        pinning_piece = board.get_piece(pin.origin)
        pinned_piece = board.get_piece(pin.location)
        where = coords_name(pin.location)

        if not pinned_piece.is_pinned:
            raise VerificationMismatch(
                f"is_pinned is False for piece at {where}",
                field="is_pinned", coords=pin.location,
            )
        if pinned_piece.pinning_piece.id != pinning_piece.id:
            raise VerificationMismatch(
                f"Pinning piece stored for piece at {where} differs from the piece at "
                f"{coords_name(pin.origin)}",
                field="pinning_piece", coords=pin.location,
            )
        if pinned_piece.pin_origin != tuple(pin.origin):
            raise VerificationMismatch(
                f"Pin origin for piece at {where} does not match {coords_name(pin.origin)}",
                field="pin_origin", coords=pin.location,
            )


def expect_state(
    info: ControlInfo,
    board: AugmentedBoard,
    controlled: Iterable[Coords] | None = None,
    check: ExpectedCheck | None = None,
    pins: Iterable[ExpectedPin] | None = None,
) -> None:
    """Check any combination of control map, check state and pins.

    `controlled` must list every controlled square: squares missing from it
    that the map marks as controlled are mismatches too.
    """
    if controlled is not None:
        _expect_control(info, controlled)
    if check is not None:
        _expect_check(info, check)
    if pins is not None:
        _expect_pins(board, pins)
