"""Test doubles for the service slots.

- CallCounter: Counting stub assignable to any slot
- ServiceMock: Service subclass carrying counters, captured returns and
  an ExpectationRecorder for framework-style substitutes
"""

from .counter import CallCounter
from .service import ServiceMock

__all__ = [
    "CallCounter",
    "ServiceMock",
]
