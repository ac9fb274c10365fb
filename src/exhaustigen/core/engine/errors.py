from __future__ import annotations


class GenError(RuntimeError):
    """
    Base class for all enumeration failures.

    Any GenError aborts the current pass; nothing is retried.
    """


class SequenceProtocolViolation(GenError):
    """
    Raised when a pass does not replay the draws of the previous pass.

    position: draw position where the mismatch was detected
    expected / actual: recorded vs requested bound (or draw counts at pass end)
    """

    def __init__(self, message: str, *, position: int, expected: int, actual: int) -> None:
        super().__init__(message)
        self.position = position
        self.expected = expected
        self.actual = actual


class AlreadyExhausted(GenError):
    """
    Raised on draw/advance after exhaustion has been signaled.
    """


class PassLimitExceeded(GenError):
    def __init__(self, *, max_passes: int) -> None:
        super().__init__(f"enumeration still has work after max_passes={max_passes}")
        self.max_passes = max_passes
