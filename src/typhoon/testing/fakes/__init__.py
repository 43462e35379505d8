"""Testing fakes – in-memory doubles for kernel ports."""
from typhoon.kernel.time import FrozenClock
from typhoon.testing.fakes.clock import FakeClock
from typhoon.testing.fakes.sleep import RecordingSleep

__all__ = ["FakeClock", "FrozenClock", "RecordingSleep"]
