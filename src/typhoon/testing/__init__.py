"""Testing – deterministic doubles for the retry loop's time ports."""
from typhoon.testing.fakes import FakeClock, FrozenClock, RecordingSleep

__all__ = ["FakeClock", "FrozenClock", "RecordingSleep"]
