"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_runtime import FixedClock, InMemoryLogger, ScriptedClock, SteppingClock

__all__ = [
    "FixedClock",
    "SteppingClock",
    "ScriptedClock",
    "InMemoryLogger",
]
