"""Square control and check detection for one side of a chess position.

analyze_control() takes an AugmentedBoard snapshot and a color ("white" or
"black") and returns an immutable ControlInfo: which squares that color's
pieces attack or defend, and whether the opposing king is in single or
double check.
"""

from chess_control.board import AugmentedBoard, PieceElement, PieceKind, PieceRef
from chess_control.config import Settings
from chess_control.control import (
    CheckState,
    ControlInfo,
    DoubleCheck,
    NoCheck,
    SingleCheck,
    analyze_control,
)
from chess_control.coords import Coords, coords_name, parse_coords
from chess_control.errors import (
    ControlError,
    InvalidArgument,
    InvariantViolation,
    PreconditionViolation,
    VerificationMismatch,
)
from chess_control.log import configure_logging
from chess_control.verification import ExpectedCheck, ExpectedPin, expect_state

__all__ = [
    "AugmentedBoard",
    "PieceElement",
    "PieceKind",
    "PieceRef",
    "Settings",
    "CheckState",
    "ControlInfo",
    "DoubleCheck",
    "NoCheck",
    "SingleCheck",
    "analyze_control",
    "Coords",
    "coords_name",
    "parse_coords",
    "ControlError",
    "InvalidArgument",
    "InvariantViolation",
    "PreconditionViolation",
    "VerificationMismatch",
    "configure_logging",
    "ExpectedCheck",
    "ExpectedPin",
    "expect_state",
]
