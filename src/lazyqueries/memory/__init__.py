"""Memory pressure detection for LazyQueries."""

from lazyqueries.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    classify_pressure,
)

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "classify_pressure",
]
