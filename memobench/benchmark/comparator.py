"""
Verdicts comparing a direct function timing against a memoized timing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FasterFunction(str, Enum):
    """Which side of a comparison finished first."""

    FUNCTION = "function"
    MEMO = "memo"
    NO_DIFF = "no diff"


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of comparing two Measurements.

    Attributes:
        faster_function: Side that took less time (or NO_DIFF on a tie)
        faster_by: Absolute difference between the two timings (milliseconds)
    """

    faster_function: FasterFunction
    faster_by: float

    def to_dict(self) -> dict[str, str | float]:
        """Report form, e.g. {"fasterFunction": "memo", "fasterBy": 6.6}."""
        return {
            "fasterFunction": self.faster_function.value,
            "fasterBy": self.faster_by,
        }


def compare(function_ms: float, memo_ms: float) -> Verdict:
    """
    Compare a direct call timing with a memoized timing.

    Args:
        function_ms: Elapsed time of the direct call
        memo_ms: Elapsed time of the memoized call

    Returns:
        Verdict naming the faster side and the margin
    """
    if function_ms > memo_ms:
        return Verdict(FasterFunction.MEMO, function_ms - memo_ms)
    if memo_ms > function_ms:
        return Verdict(FasterFunction.FUNCTION, memo_ms - function_ms)
    return Verdict(FasterFunction.NO_DIFF, 0.0)
