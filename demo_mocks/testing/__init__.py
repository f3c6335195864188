"""Test support shipped with the package.

- ExpectationRecorder: registers expected calls, answers substitutes,
  and verifies that every expectation was met
"""

from .expectations import (
    Call,
    Expectation,
    ExpectationError,
    ExpectationRecorder,
    OverCallError,
    UnexpectedCallError,
    UnmetExpectationError,
)

__all__ = [
    "Call",
    "Expectation",
    "ExpectationError",
    "ExpectationRecorder",
    "OverCallError",
    "UnexpectedCallError",
    "UnmetExpectationError",
]
