"""Resilience – deadlines bounding a whole retry lifecycle."""
from typhoon.resilience.timeouts.deadline import Deadline

__all__ = ["Deadline"]
