"""
Timing module.

Provides clocks used to measure elapsed time:
- Clock: Abstract millisecond clock
- PerfCounterClock: High-resolution system clock
- ManualClock: Scripted clock for deterministic runs
"""

from memobench.timing.clock import Clock, ManualClock, PerfCounterClock

__all__ = [
    "Clock",
    "PerfCounterClock",
    "ManualClock",
]
