"""Tests for the expect_state verification harness."""

import pytest

from chess_control import (
    AugmentedBoard,
    ExpectedCheck,
    ExpectedPin,
    VerificationMismatch,
    analyze_control,
    expect_state,
    parse_coords,
)

ROOK_CHECK = "k7/8/8/8/8/8/8/R7 w - - 0 1"
PAWNS_DOUBLE_CHECK = "8/8/8/8/8/2k5/1P1P4/8 w - - 0 1"
PIN_POSITION = "4k3/8/8/8/4n3/8/8/4R2K w - - 0 1"
EMPTY_BOARD = "8/8/8/8/8/8/8/8 w - - 0 1"

ROOK_CONTROL = [(r, 0) for r in range(1, 8)] + [(0, f) for f in range(1, 8)]


def _build(fen: str, color: str = "white"):
    board = AugmentedBoard.from_fen(fen)
    return board, analyze_control(board, color)


class TestControlExpectations:
    def test_exact_match(self):
        board, info = _build(ROOK_CHECK)
        expect_state(info, board, controlled=ROOK_CONTROL)

    def test_missing_square(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, controlled=ROOK_CONTROL + [parse_coords("b2")])
        assert exc.value.coords == parse_coords("b2")
        assert "b2" in str(exc.value)

    def test_unexpected_square(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, controlled=ROOK_CONTROL[1:])
        assert exc.value.coords == (1, 0)

    def test_off_board_square(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, controlled=ROOK_CONTROL + [(8, 0)])
        assert exc.value.coords == (8, 0)

    def test_mismatch_is_assertion_error(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(AssertionError):
            expect_state(info, board, controlled=[])


class TestCheckExpectations:
    def test_single_check(self):
        board, info = _build(ROOK_CHECK)
        expect_state(info, board, check=ExpectedCheck(
            has_king_in_single_check=True,
            checking_piece_id=board.get_piece((0, 0)).id,
            checking_piece_coordinates=(0, 0),
            king_coordinates=(7, 0),
        ))

    def test_double_check(self):
        board, info = _build(PAWNS_DOUBLE_CHECK)
        expect_state(
            info, board,
            controlled=[parse_coords(n) for n in ("a3", "c3", "e3")],
            check=ExpectedCheck(has_king_in_double_check=True),
        )

    def test_wrong_check_flag(self):
        board, info = _build(PAWNS_DOUBLE_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, check=ExpectedCheck(has_king_in_single_check=True))
        assert exc.value.field == "has_king_in_single_check"

    def test_wrong_checking_piece(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, check=ExpectedCheck(
                has_king_in_single_check=True,
                checking_piece_id=board.get_piece((7, 0)).id,
                checking_piece_coordinates=(0, 0),
                king_coordinates=(7, 0),
            ))
        assert exc.value.field == "checking_piece"

    def test_wrong_king_coordinates(self):
        board, info = _build(ROOK_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, check=ExpectedCheck(
                has_king_in_single_check=True,
                checking_piece_id=board.get_piece((0, 0)).id,
                checking_piece_coordinates=(0, 0),
                king_coordinates=(7, 1),
            ))
        assert exc.value.field == "king_coordinates"

    def test_checker_fields_without_any_check(self):
        board, info = _build(EMPTY_BOARD)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, check=ExpectedCheck(checking_piece_id=3, king_coordinates=(7, 7)))
        assert exc.value.field == "checking_piece_id"

    def test_checker_fields_in_double_check(self):
        board, info = _build(PAWNS_DOUBLE_CHECK)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, check=ExpectedCheck(
                has_king_in_double_check=True,
                king_coordinates=parse_coords("c3"),
            ))
        assert exc.value.field == "king_coordinates"


class TestPinExpectations:
    def test_pin_matches(self):
        board, info = _build(PIN_POSITION)
        expect_state(info, board, pins=[
            ExpectedPin(origin=parse_coords("e1"), location=parse_coords("e4")),
        ])

    def test_piece_not_pinned(self):
        board, info = _build(PIN_POSITION)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, pins=[
                ExpectedPin(origin=parse_coords("e8"), location=parse_coords("h1")),
            ])
        assert exc.value.field == "is_pinned"
        assert exc.value.coords == parse_coords("h1")

    def test_wrong_pinning_piece(self):
        board, info = _build(PIN_POSITION)
        with pytest.raises(VerificationMismatch) as exc:
            expect_state(info, board, pins=[
                ExpectedPin(origin=parse_coords("h1"), location=parse_coords("e4")),
            ])
        assert exc.value.field == "pinning_piece"
