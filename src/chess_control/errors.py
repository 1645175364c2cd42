"""Error taxonomy for control analysis.

Caller mistakes (InvalidArgument, PreconditionViolation) are expected to be
handled. InvariantViolation means the board itself is corrupt and the
analysis must not continue. VerificationMismatch is only raised by the test
harness in verification.py.
"""

from chess_control.coords import Coords

__all__ = [
    "ControlError",
    "InvalidArgument",
    "PreconditionViolation",
    "InvariantViolation",
    "VerificationMismatch",
]


class ControlError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(ControlError, ValueError):
    """Bad input: wrong board type, unknown color, off-board coordinate, empty square."""


class PreconditionViolation(ControlError, RuntimeError):
    """A query was made that is only valid in another check state."""


class InvariantViolation(ControlError, AssertionError):
    """The position is impossible (e.g. a third simultaneous check)."""


class VerificationMismatch(ControlError, AssertionError):
    """Expected and actual analysis state differ."""

    def __init__(self, message: str, *, field: str | None = None, coords: Coords | None = None):
        super().__init__(message)
        self.field = field
        self.coords = coords
